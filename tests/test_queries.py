import pytest

from filesql.queries import Database, QueryError, where_matches
from filesql.schema import Schema
from filesql.tokenizer import parse_query

CREATE = (
    "create table Student(roll int check(roll>0), name varchar(20), dob date, "
    "percent decimal(4,2), primary key(roll));"
)
ATTRIBUTES = ["roll", "name", "dob", "percent"]
RECORD = "<7,Zed,01-01-2000,50.5>"


@pytest.fixture
def db(tmp_path):
    Schema(tmp_path).create_table(parse_query(CREATE))
    return Database(tmp_path)


def add(db, roll, name, dob, percent):
    return db.insert(
        parse_query(f'insert into Student values({roll},"{name}",{dob},{percent});')
    )


@pytest.fixture
def filled(db):
    add(db, 1, "Ann Lee", "24-02-2001", "84.25")
    add(db, 2, "Bob Ray", "01-01-2000", "39.50")
    add(db, 3, "Cal Doe", "15-07-2002", "91.00")
    return db


def test_insert_appends_record(db, tmp_path):
    record = add(db, 1, "Ann Lee", "24-02-2001", "84.25")
    assert record == "<1,Ann Lee,24-02-2001,84.25>"
    assert (tmp_path / "Student.txt").read_text() == record + "\n"


def test_insert_duplicate_primary_key(filled):
    with pytest.raises(QueryError, match="PK already exists"):
        add(filled, 2, "Dee Fox", "02-02-2002", "50.00")


def test_insert_too_few_values(db):
    with pytest.raises(QueryError, match="Less Values Specified"):
        db.insert(parse_query('insert into Student values(4,"Dee");'))


def test_insert_too_many_values(db):
    with pytest.raises(QueryError, match="More Values Specified"):
        db.insert(parse_query('insert into Student values(4,"Dee",02-02-2002,50.5,9);'))


def test_insert_wrong_order(db):
    with pytest.raises(QueryError, match="proper order"):
        db.insert(parse_query('insert into Student values(4,02-02-2002,"Dee",50.5);'))


def test_select_star_returns_all_rows(filled):
    rows = filled.select(parse_query("select * from Student;"))
    assert rows == [
        ["1", "Ann Lee", "24-02-2001", "84.25"],
        ["2", "Bob Ray", "01-01-2000", "39.50"],
        ["3", "Cal Doe", "15-07-2002", "91.00"],
    ]


def test_select_projection_with_numeric_where(filled):
    rows = filled.select(parse_query("select name,roll from Student where percent>80;"))
    assert rows == [["Ann Lee", "1"], ["Cal Doe", "3"]]


def test_select_text_where(filled):
    rows = filled.select(parse_query('select roll from Student where name="Bob Ray";'))
    assert rows == [["2"]]


def test_select_unknown_table(db):
    with pytest.raises(QueryError, match="Teacher"):
        db.select(parse_query("select * from Teacher;"))


def test_select_without_data_file(db):
    assert db.select(parse_query("select * from Student;")) is None


def test_update_with_where(filled):
    affected = filled.update(parse_query("update Student set percent=95.5 where roll=2;"))
    assert affected == 1
    rows = filled.select(parse_query("select percent from Student where roll=2;"))
    assert rows == [["95.5"]]
    others = filled.select(parse_query("select percent from Student where roll!=2;"))
    assert others == [["84.25"], ["91.00"]]


def test_update_without_where_touches_every_row(filled):
    assert filled.update(parse_query("update Student set name=Xavier;")) == 3
    names = filled.select(parse_query("select name from Student;"))
    assert names == [["Xavier"]] * 3
    with pytest.raises(QueryError, match="PK already exists"):
        add(filled, 1, "Ann Lee", "24-02-2001", "84.25")


def test_update_primary_key_rejected(filled):
    with pytest.raises(QueryError, match="Cannot be Updated"):
        filled.update(parse_query("update Student set roll=9 where roll=1;"))


def test_delete_with_where(filled):
    assert filled.delete(parse_query("delete from Student where percent<40;")) == 1
    rows = filled.select(parse_query("select roll from Student;"))
    assert rows == [["1"], ["3"]]


def test_delete_everything_removes_data_file(filled, tmp_path):
    assert filled.delete(parse_query("delete from Student;")) == 3
    assert not (tmp_path / "Student.txt").exists()
    assert filled.select(parse_query("select * from Student;")) is None
    assert filled.schema.table_exists("Student")


def test_where_matches_without_clause():
    assert where_matches(RECORD, ["select", "*", "from", "T"], 3, ATTRIBUTES)


@pytest.mark.parametrize(
    "op, literal, expected",
    [(">", "50", True), ("<", "50", False), ("=", "50.5", True), ("!=", "50.5", False)],
)
def test_where_matches_numeric(op, literal, expected):
    tokens = ["select", "*", "from", "T", "where", "percent", op, literal]
    assert where_matches(RECORD, tokens, 3, ATTRIBUTES) is expected


def test_where_matches_text():
    tokens = ["select", "*", "from", "T", "where", "name", "=", "Zed"]
    assert where_matches(RECORD, tokens, 3, ATTRIBUTES) is True
    tokens[-2] = "!="
    assert where_matches(RECORD, tokens, 3, ATTRIBUTES) is False


def test_where_matches_unknown_attribute():
    tokens = ["select", "*", "from", "T", "where", "age", ">", "5"]
    with pytest.raises(QueryError):
        where_matches(RECORD, tokens, 3, ATTRIBUTES)


def test_where_matches_text_ordering_rejected():
    tokens = ["select", "*", "from", "T", "where", "name", ">", "Abe"]
    with pytest.raises(QueryError):
        where_matches(RECORD, tokens, 3, ATTRIBUTES)