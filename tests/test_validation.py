import pytest

from filesql.schema import Schema
from filesql.tokenizer import parse_query
from filesql.validation import ValidationError, check_errors

CREATE = "create table Student(roll int, name varchar(20), primary key(roll));"


@pytest.fixture
def schema(tmp_path):
    return Schema(tmp_path)


@pytest.fixture
def with_table(schema):
    schema.create_table(parse_query(CREATE))
    return schema


def test_empty_statement_has_nothing_to_run(schema):
    assert check_errors([], schema) is False


def test_new_table_may_be_created(schema):
    assert check_errors(parse_query(CREATE), schema) is True


def test_existing_table_not_created_again(with_table):
    with pytest.raises(ValidationError) as info:
        check_errors(parse_query(CREATE), with_table)
    assert info.value.reason == "table <Student> already exists"
    assert info.value.outcome == "Table not created"


def test_primary_key_is_mandatory(schema):
    with pytest.raises(ValidationError) as info:
        check_errors(parse_query("create table T(a int, b int);"), schema)
    assert info.value.reason == "Defining PK is mandatory"
    assert info.value.outcome == "Table not created"


@pytest.mark.parametrize(
    "query, outcome",
    [
        ("drop table Teacher;", "Table not dropped"),
        ("describe Teacher;", "Table cannot be described"),
        ("insert into Teacher values(1);", "Tuple not inserted"),
        ("delete from Teacher;", "0 rows affected"),
        ("update Teacher set a=1;", "0 rows affected"),
    ],
)
def test_missing_table_rejected(with_table, query, outcome):
    with pytest.raises(ValidationError) as info:
        check_errors(parse_query(query), with_table)
    assert info.value.reason == "table <Teacher> doesn't exists"
    assert info.value.outcome == outcome


@pytest.mark.parametrize(
    "query",
    [
        "drop table Student;",
        "describe Student;",
        "insert into Student values(1,\"Ann\");",
        "delete from Student;",
        "update Student set name=Ann;",
        "select * from Teacher;",
        "help tables;",
        "quit;",
    ],
)
def test_valid_statements_pass(with_table, query):
    assert check_errors(parse_query(query), with_table) is True


def test_error_message_is_reason(with_table):
    with pytest.raises(ValidationError, match="doesn't exists"):
        check_errors(parse_query("describe Nobody;"), with_table)