"""Splitting query text into tokens and normalising keyword case."""

from __future__ import annotations

import re

KEYWORDS = frozenset(
    {
        "create",
        "table",
        "primary",
        "key",
        "int",
        "varchar",
        "date",
        "decimal",
        "drop",
        "describe",
        "insert",
        "into",
        "values",
        "help",
        "tables",
        "select",
        "from",
        "where",
        "and",
        "or",
    }
)

_SEPARATORS = " (),;*"
_OPERATORS = "<>="

_TOKEN_RE = re.compile(
    r'"(?P<quoted>[^"]*)"?'
    r"|(?P<neq>!=)"
    r"|(?P<op>[<>=])"
    r"|(?P<sep>[ (),;*])"
    r'|(?P<text>[^" (),;*<>=!]+|!)'
)


def tokenize(query: str) -> list[str]:
    """Split a query into tokens.

    Spaces, parentheses, commas and semicolons separate tokens; ``*``,
    ``<``, ``>``, ``=`` and ``!=`` are tokens of their own; text between
    double quotes is taken literally.
    """
    tokens: list[str] = []
    current: list[str] = []

    def flush() -> None:
        if current:
            tokens.append("".join(current))
            current.clear()

    for match in _TOKEN_RE.finditer(query):
        kind = match.lastgroup
        if kind == "quoted":
            current.append(match.group("quoted"))
            flush()
        elif kind == "neq":
            flush()
            tokens.append("!=")
        elif kind == "op":
            flush()
            tokens.append(match.group("op"))
        elif kind == "sep":
            flush()
            if match.group("sep") == "*":
                tokens.append("*")
        else:
            current.append(match.group(0))
    flush()
    return tokens


def normalize_keywords(tokens: list[str]) -> list[str]:
    """Return the tokens with every keyword turned to lower case."""
    return [token.lower() if token.lower() in KEYWORDS else token for token in tokens]


def parse_query(query: str) -> list[str]:
    """Tokenize a query and normalise the case of its keywords."""
    return normalize_keywords(tokenize(query))