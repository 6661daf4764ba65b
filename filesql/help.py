"""Help texts for the interactive shell."""

from __future__ import annotations

from filesql.schema import Schema

_COMMANDS = {
    "create": (
        "Used to create tables in SQL",
        "create table table_name (attr1 type1, attr2 type2 check(cond1 AND cond2), "
        "primary key(attr1));",
        'create table Student(roll int check(roll>0), name varchar(20) '
        'check(name!="ABC"), dob date, percent decimal(4,2), primary key(roll));',
    ),
    "drop": (
        "Used to drop the tables from the SQL",
        "drop table table_name;",
        "drop table Students;",
    ),
    "insert": (
        "Used to insert data into the tables in SQL",
        "insert into table_name values(val1 , val2 ,... );",
        'insert into Students values(100,"Saurabh Yelmame",24-02-2001,84.25);',
    ),
    "select": (
        "Used to select tuples from tables with specified conditions in sql.",
        "select attribute_list from table _list where condition_list",
        "select name,dob from Students where percent>85.00",
    ),
    "delete": (
        "Used to delete tables in sql.",
        "delete from table_name where condition_list ;",
        "delete from Students where percent<40.00",
    ),
    "update": (
        "Used to update tuples from the tables in sql.",
        "update table_name set attr1=val1 ,attr2 = val2 where condition_list ;",
        "update Students set percent=90 where percent>90",
    ),
}


def help_tables(schema: Schema) -> str:
    """Return the listing of every table in the schema."""
    if not schema.path.exists():
        return "No Tables Found"
    return "\n".join(["Tables in the database are : ", *schema.table_names()])


def help_command(tokens) -> str:
    """Return the description, syntax and an example of the command asked about."""
    topic = tokens[1] if len(tokens) > 1 else ""
    entry = _COMMANDS.get(topic)
    if entry is None:
        return "Invalid Query"
    summary, syntax, example = entry
    return "\n".join([summary, f"SYNTAX : {syntax}", "Eg -", example])