"""The schema file that describes every table of a database directory."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from pathlib import Path

SCHEMA_FILENAME = "SchemaFile.txt"


@dataclass(frozen=True)
class Column:
    """One attribute of a table as stored in the schema file."""

    name: str
    datatype: str
    size: tuple[str, ...] = ()
    constraint: str = ""

    @classmethod
    def from_line(cls, line: str) -> "Column":
        head, _, constraint = line.partition(" check ")
        words = head.split()
        if len(words) < 2:
            raise ValueError(f"malformed attribute line: {line!r}")
        name, datatype, *size = words
        return cls(name, datatype, tuple(size), constraint)

    def to_line(self) -> str:
        parts = [self.name, self.datatype, *self.size]
        line = " ".join(parts)
        if self.constraint:
            line += " check " + self.constraint
        return line


def _header_name(line: str) -> str | None:
    if line.startswith("*"):
        return line[1:-1]
    return None


class Schema:
    """Access to the schema file kept in a database directory."""

    def __init__(self, root=".") -> None:
        self.root = Path(root)
        self.path = self.root / SCHEMA_FILENAME

    def _lines(self) -> list[str]:
        if not self.path.exists():
            return []
        return self.path.read_text(encoding="utf-8").splitlines()

    def _body(self, name: str) -> list[str]:
        lines = iter(self._lines())
        for line in lines:
            if _header_name(line) == name:
                next(lines, None)  # the "<<" line
                body = []
                for inner in lines:
                    if inner == ">>":
                        break
                    body.append(inner)
                return body
        raise KeyError(name)

    def table_exists(self, name: str) -> bool:
        return any(_header_name(line) == name for line in self._lines())

    def table_names(self) -> list[str]:
        return [
            line[1:-1]
            for line in self._lines()
            if len(line) >= 2 and line.startswith("*") and line.endswith("*")
        ]

    def create_table(self, tokens: list[str]) -> list[Column]:
        """Append the table defined by a tokenized create statement."""
        if len(tokens) < 6:
            raise ValueError("incomplete create table statement")
        table, primary = tokens[2], tokens[-1]
        pending = deque(tokens[3:-3])

        def take() -> str:
            if not pending:
                raise ValueError("incomplete attribute definition")
            return pending.popleft()

        def condition() -> str:
            return " ".join(take() for _ in range(3))

        columns = []
        while pending:
            name, datatype = take(), take()
            if datatype == "varchar":
                size: tuple[str, ...] = (take(),)
            elif datatype == "decimal":
                size = (take(), take())
            else:
                size = ()
            conditions = []
            if pending and pending[0] == "check":
                pending.popleft()
                conditions.append(condition())
                while pending and pending[0].upper() in ("AND", "OR"):
                    conditions.append(pending.popleft())
                    conditions.append(condition())
            columns.append(Column(name, datatype, size, " ".join(conditions)))

        text = [f"*{table}*", "<<", f"pk: {primary}"]
        text.extend(column.to_line() for column in columns)
        text.extend([">>", ""])
        self.root.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write("\n".join(text) + "\n")
        return columns

    def drop_table(self, name: str) -> None:
        """Remove a table from the schema and delete its data file."""
        kept = []
        found = False
        lines = iter(self._lines())
        for line in lines:
            if _header_name(line) == name:
                found = True
                for inner in lines:
                    if inner == ">>":
                        break
                next(lines, None)  # blank line after the block
                continue
            kept.append(line)
        if not found:
            raise KeyError(name)
        self.path.write_text("".join(line + "\n" for line in kept), encoding="utf-8")
        (self.root / f"{name}.txt").unlink(missing_ok=True)

    def describe(self, name: str) -> list[str]:
        """Return the stored lines of a table, primary key line first."""
        return self._body(name)

    def columns(self, name: str) -> list[Column]:
        return [Column.from_line(line) for line in self._body(name)[1:]]

    def attributes(self, name: str) -> list[str]:
        return [column.name for column in self.columns(name)]

    def datatypes(self, name: str) -> list[str]:
        return [column.datatype for column in self.columns(name)]

    def primary_key(self, name: str) -> str:
        body = self._body(name)
        if not body:
            raise KeyError(name)
        return body[0][4:]

    def attribute_count(self, name: str) -> int:
        return len(self.columns(name))