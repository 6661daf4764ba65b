# filesql

A small SQL-like database that you use from a terminal prompt. It keeps all of
its data in plain text files inside one database directory:

- `SchemaFile.txt` holds the definitions of every table.
- The rows of each table are in `<TableName>.txt`, one `<v1,v2,...>` record per line.

## Installing

```
pip install .
```

## Starting the shell

```
filesql [DIRECTORY]
```

`DIRECTORY` is the database directory and defaults to the current one. At the
`>>` prompt type one statement per line and end it with `;`. The shell stops on
`quit;` or at the end of input.

## Statements

```
create table Student(roll int check(roll>0), name varchar(20), dob date, percent decimal(4,2), primary key(roll));
insert into Student values(100,"Saurabh Yelmame",24-02-2001,84.25);
select * from Student;
select name,dob from Student where percent>80.00;
update Student set percent=90 where roll=100;
delete from Student where percent<40.00;
delete from Student;
describe Student;
drop table Student;
help tables;
help select;
quit;
```

Keywords may be written in any case. Text in double quotes is taken as one
value.

- Column types are `int`, `varchar(n)`, `date` (written `dd-mm-yyyy`) and
  `decimal(p,s)`. A `create table` statement must end with `primary key(...)`.
- `insert` needs exactly one value per column, in the order and of the types
  the table declares. The type of a value is judged from how it looks: text
  that starts with a letter is `varchar`, a `-` in third place makes a `date`,
  digits only make an `int`, anything else a `decimal`. A row whose first value
  is already present in the table is refused.
- `update` cannot set the primary key column.
- A `where` clause holds a single comparison. When the value written after the
  operator starts with a digit, both sides are compared as numbers with `=`,
  `!=`, `<` or `>`; otherwise they are compared as text with `=` or `!=`.
- `delete from T;` without a `where` clause deletes the table's data file but
  keeps the table in the schema. `drop table` removes both.
- `describe` prints the primary key line and the stored column lines.
  `help tables` lists the tables; `help <command>` explains `create`, `drop`,
  `insert`, `select`, `delete` or `update`.

## Using it from Python

```python
from filesql.queries import Database
from filesql.shell import run_query

db = Database("data")
run_query(db, "create table T(id int, name varchar(10), primary key(id));")
run_query(db, 'insert into T values(1,"Ann");')
print(run_query(db, "select * from T;"))
```

`run_query` returns the text the shell would print. Below it:

- `filesql.tokenizer.parse_query` turns a statement into its token list.
- `filesql.validation.check_errors` checks a token list against the schema and
  raises `ValidationError` when the statement must not run.
- `filesql.queries.Database` has `insert`, `select`, `update` and `delete`,
  which take token lists and raise `QueryError` on failure; `select` returns the
  rows as lists of strings, or `None` when the table has no data file.
- `filesql.schema.Schema` reads and edits the table definitions
  (`create_table`, `drop_table`, `describe`, `columns`, `attributes`,
  `datatypes`, `primary_key`, `table_names`, `table_exists`).
- `filesql.records` reads and writes single `<...>` records.

## What it does not do

- `check(...)` conditions are stored in the schema and shown by `describe`,
  but they are not enforced when rows are inserted or updated.
- A `where` clause cannot combine comparisons with `and` or `or`, and dates
  cannot be compared in one (a literal such as `24-02-2001` is not a number).
- There are no joins, no ordering, no transactions and no locking; only one
  table is named in each statement.

## Running the tests

```
pip install .[test]
pytest
```