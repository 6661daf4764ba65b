"""Checks made on a statement before it is run."""

from __future__ import annotations


class ValidationError(Exception):
    """A statement rejected before running; ``outcome`` says what was not done."""

    def __init__(self, reason: str, outcome: str) -> None:
        super().__init__(reason)
        self.reason = reason
        self.outcome = outcome


def _word(tokens, index: int) -> str:
    return tokens[index] if 0 <= index < len(tokens) else ""


def _require(schema, name: str, outcome: str) -> None:
    if not schema.table_exists(name):
        raise ValidationError(f"table <{name}> doesn't exists", outcome)


def check_errors(tokens, schema) -> bool:
    """Check a tokenized statement against the schema.

    Returns False when there is nothing to run, True when the statement may
    run, and raises ValidationError when it must not.
    """
    if not tokens:
        return False
    first, second = _word(tokens, 0), _word(tokens, 1)

    if first == "create" and second == "table":
        name = _word(tokens, 2)
        if schema.table_exists(name):
            raise ValidationError(f"table <{name}> already exists", "Table not created")
        size = len(tokens)
        if _word(tokens, size - 3) != "primary" and _word(tokens, size - 2) != "key":
            raise ValidationError("Defining PK is mandatory", "Table not created")
    elif first == "drop" and second == "table":
        _require(schema, _word(tokens, 2), "Table not dropped")
    elif first == "describe":
        _require(schema, second, "Table cannot be described")
    elif first == "insert" and second == "into":
        _require(schema, _word(tokens, 2), "Tuple not inserted")
    elif first == "delete" and second == "from":
        _require(schema, _word(tokens, 2), "0 rows affected")
    elif first == "update":
        _require(schema, second, "0 rows affected")
    return True