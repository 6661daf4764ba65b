"""Running insert, select, update and delete statements against table files."""

from __future__ import annotations

import operator
import string
from pathlib import Path

from filesql.records import extract_column, format_record, infer_type, split_record
from filesql.schema import Schema

_NUMERIC_OPERATORS = {
    ">": operator.gt,
    "<": operator.lt,
    "=": operator.eq,
    "!=": operator.ne,
}
_TEXT_OPERATORS = {
    "=": operator.eq,
    "!=": operator.ne,
}


class QueryError(Exception):
    """A statement that could not be carried out."""


def _number(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise QueryError(f"{text!r} is not a number") from None


def where_matches(record, tokens, index, attributes) -> bool:
    """Tell whether a record satisfies the where clause after ``tokens[index]``.

    ``index`` points at the token just before ``where``; when nothing follows
    it, every record matches.
    """
    if index + 1 >= len(tokens):
        return True
    clause = tokens[index + 2 : index + 5]
    if len(clause) < 3:
        raise QueryError("incomplete where clause")
    name, op, literal = clause
    attributes = list(attributes)
    if name not in attributes:
        raise QueryError(f"unknown attribute <{name}>")
    try:
        value = extract_column(record, attributes.index(name))
    except IndexError:
        raise QueryError(f"record {record!r} has no value for <{name}>") from None

    if literal[:1] and literal[0] in string.digits:
        compare = _NUMERIC_OPERATORS.get(op)
        if compare is None:
            raise QueryError(f"unsupported operator {op!r}")
        return compare(_number(value), _number(literal))
    compare = _TEXT_OPERATORS.get(op)
    if compare is None:
        raise QueryError(f"operator {op!r} cannot compare text")
    return compare(value, literal)


class Database:
    """Tables kept as one data file each next to a schema file."""

    def __init__(self, root=".") -> None:
        self.root = Path(root)
        self.schema = Schema(self.root)

    def _table_path(self, name: str) -> Path:
        return self.root / f"{name}.txt"

    def _require_table(self, name: str) -> None:
        if not self.schema.table_exists(name):
            raise QueryError(f"table <{name}> doesn't exists")

    def _records(self, name: str) -> list[str] | None:
        """Return the stored records, or None when the table has no data file."""
        path = self._table_path(name)
        if not path.exists():
            return None
        records = []
        for line in path.read_text(encoding="utf-8").splitlines():
            if not line:
                break
            records.append(line)
        return records

    def _write(self, name: str, lines) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        text = "".join(line + "\n" for line in lines)
        self._table_path(name).write_text(text, encoding="utf-8")

    def insert(self, tokens) -> str:
        """Append the tuple of an insert statement and return the stored record."""
        if len(tokens) < 3:
            raise QueryError("missing table name")
        table = tokens[2]
        self._require_table(table)
        values = list(tokens[4:])
        existing = self._records(table) or []
        if values and any(extract_column(record, 0) == values[0] for record in existing):
            raise QueryError("PK already exists")

        expected = self.schema.datatypes(table)
        if len(values) < len(expected):
            raise QueryError("Less Values Specified")
        if len(values) > len(expected):
            raise QueryError("More Values Specified")
        if [infer_type(value) for value in values] != expected:
            raise QueryError("Values not specified in proper order")

        record = format_record(values)
        self.root.mkdir(parents=True, exist_ok=True)
        with self._table_path(table).open("a", encoding="utf-8") as handle:
            handle.write(record + "\n")
        return record

    def select(self, tokens) -> list[list[str]] | None:
        """Return the selected rows, or None when the table has no records yet."""
        if "from" not in tokens:
            raise QueryError("missing from clause")
        position = tokens.index("from") + 1
        if position >= len(tokens):
            raise QueryError("missing table name")
        table = tokens[position]
        if not self.schema.table_exists(table):
            raise QueryError(f"table <{table}> table doesn't exists")

        attributes = self.schema.attributes(table)
        if tokens[1] == "*":
            wanted = list(range(len(attributes)))
        else:
            wanted = [
                attributes.index(token)
                for token in tokens[1 : position - 1]
                if token in attributes
            ]

        records = self._records(table)
        if records is None:
            return None
        try:
            return [
                [extract_column(record, column) for column in wanted]
                for record in records
                if where_matches(record, tokens, position, attributes)
            ]
        except IndexError as exc:
            raise QueryError(str(exc)) from None

    def update(self, tokens) -> int:
        """Apply an update statement and return the number of rows affected."""
        if len(tokens) < 2:
            raise QueryError("missing table name")
        table = tokens[1]
        self._require_table(table)
        where = tokens.index("where", 3) if "where" in tokens[3:] else len(tokens)

        assignments = {}
        for start in range(3, where, 3):
            if start + 2 >= where:
                raise QueryError("incomplete assignment")
            assignments[tokens[start]] = tokens[start + 2]

        if self.schema.primary_key(table) in assignments:
            raise QueryError("Cannot be Updated, same PK would get set")

        attributes = self.schema.attributes(table)
        targets = {
            attributes.index(name): value
            for name, value in assignments.items()
            if name in attributes
        }

        affected = 0
        lines = []
        for record in self._records(table) or []:
            values = split_record(record)
            if where_matches(record, tokens, where - 1, attributes):
                affected += 1
                for column, value in targets.items():
                    if column >= len(values):
                        raise QueryError(f"record {record!r} has no column {column}")
                    values[column] = value
            lines.append(format_record(values))
        self._write(table, lines)
        return affected

    def delete(self, tokens) -> int:
        """Apply a delete statement and return the number of rows affected.

        Without a where clause the data file itself is removed while the
        table stays in the schema.
        """
        if len(tokens) < 3:
            raise QueryError("missing table name")
        table = tokens[2]
        self._require_table(table)
        path = self._table_path(table)

        if len(tokens) == 3:
            if not path.exists():
                return 0
            count = len(path.read_text(encoding="utf-8").splitlines())
            path.unlink()
            return count

        attributes = self.schema.attributes(table)
        records = self._records(table) or []
        kept = [
            record
            for record in records
            if not where_matches(record, tokens, 2, attributes)
        ]
        self._write(table, kept)
        return len(records) - len(kept)