"""Reading and writing single records of a table data file."""

from __future__ import annotations

import string


def extract_column(record: str, index: int) -> str:
    """Return the value at ``index`` of a record such as ``<1,Ann,24-02-2001>``."""
    fields = record[1:].split(",")
    if index < 0 or index >= len(fields):
        raise IndexError(f"record {record!r} has no column {index}")
    return fields[index].split(">", 1)[0]


def split_record(record: str) -> list[str]:
    """Return every value of a record, ignoring one trailing comma."""
    body = record[1:-1]
    if not body:
        return []
    values = body.split(",")
    if body.endswith(","):
        values.pop()
    return values


def format_record(values) -> str:
    """Render values as a record line without the line break."""
    return "<" + ",".join(values) + ">"


def infer_type(value: str) -> str:
    """Guess the column type a literal value belongs to."""
    if value and value[0].isascii() and value[0].isalpha():
        return "varchar"
    if len(value) > 2 and value[2] == "-":
        return "date"
    if all(char in string.digits for char in value):
        return "int"
    return "decimal"