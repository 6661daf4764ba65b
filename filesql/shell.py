"""The interactive prompt that reads statements and runs them."""

from __future__ import annotations

import argparse
import sys

from filesql.help import help_command, help_tables
from filesql.queries import Database, QueryError
from filesql.tokenizer import parse_query
from filesql.validation import ValidationError, check_errors


class QuitRequested(Exception):
    """Raised when the user asks the shell to stop."""


def _format_rows(rows) -> str:
    return "\n".join("".join(f"{value:<25}" for value in row) for row in rows)


def execute(database: Database, tokens) -> str:
    """Run a validated statement and return the text it produces."""
    if not tokens:
        return "Please enter some commmand"
    first = tokens[0]
    second = tokens[1] if len(tokens) > 1 else ""

    if first == "create" and second == "table":
        try:
            database.schema.create_table(tokens)
        except ValueError as exc:
            return f"{exc}\nTable not created"
        return "Table Created Successfully"
    if first == "drop" and second == "table":
        database.schema.drop_table(tokens[2])
        return f"<{tokens[2]}> Dropped Successfully"
    if first == "describe":
        return "\n".join(database.schema.describe(second))
    if first == "help" and second == "tables":
        return help_tables(database.schema)
    if first == "help":
        return help_command(tokens)
    if first == "insert" and second == "into":
        try:
            database.insert(tokens)
        except QueryError as exc:
            return f"{exc}\nTuple not inserted"
        return ""
    if first == "delete" and second == "from":
        try:
            return f"{database.delete(tokens)} rows affected"
        except QueryError as exc:
            return str(exc)
    if first == "update":
        try:
            return f"{database.update(tokens)} rows affected"
        except QueryError as exc:
            return str(exc)
    if first == "select":
        try:
            rows = database.select(tokens)
        except QueryError as exc:
            return str(exc)
        if rows is None:
            return "No Records yet"
        return _format_rows(rows)
    if first == "quit":
        raise QuitRequested("Program terminated successfully.")
    return "Unrecognized command"


def run_query(database: Database, query: str) -> str:
    """Check and run one line of input, returning the text to show."""
    if not query.endswith(";"):
        return "; missing at the end"
    tokens = parse_query(query)
    try:
        if not check_errors(tokens, database.schema):
            return ""
    except ValidationError as exc:
        return f"{exc.reason}\n{exc.outcome}"
    return execute(database, tokens)


def main(argv=None) -> int:
    """Read statements from standard input until quit or end of input."""
    parser = argparse.ArgumentParser(description="Query tables stored as text files.")
    parser.add_argument("root", nargs="?", default=".", help="database directory")
    args = parser.parse_args(argv)
    database = Database(args.root)

    while True:
        print("\n>> ", end="", flush=True)
        try:
            query = input()
        except EOFError:
            print()
            return 0
        print()
        try:
            output = run_query(database, query)
        except QuitRequested as exc:
            print(exc)
            return 0
        if output:
            print(output)


if __name__ == "__main__":
    sys.exit(main())