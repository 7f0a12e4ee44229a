"""Expression model for dotlisp.

Every value, code and data alike, is one of two variants:

- Atom: a leaf holding a string token. Whether the token is an integer,
  the true/false symbols, or an identifier is decided when it is used.
- Pair: a node holding two expressions, `first` and `rest`.

Both variants are frozen, so any expression may be shared between the
reader, the evaluator and every call frame without copying. The two
singletons T and NIL are created once here and returned by identity
wherever a built-in produces a boolean or the empty list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union


INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class Atom:
    token: str

    def __str__(self) -> str:
        return self.token


@dataclass(frozen=True, slots=True)
class Pair:
    first: SExp
    rest: SExp

    def __str__(self) -> str:
        from dotlisp.printer import to_dot_notation
        return to_dot_notation(self)


SExp = Union[Atom, Pair]

T = Atom("T")
NIL = Atom("NIL")


# -------------------------------
# Classification
# -------------------------------
def is_null(expr: SExp) -> bool:
    """An atom spelled NIL (any case) is null; a pair never is."""
    return expr is NIL or (isinstance(expr, Atom) and expr.token.upper() == "NIL")


def is_true(expr: SExp) -> bool:
    return expr is T or (isinstance(expr, Atom) and expr.token.upper() == "T")


def is_integer(expr: SExp) -> bool:
    return isinstance(expr, Atom) and INTEGER_RE.fullmatch(expr.token) is not None


def is_valid_identifier(token: str) -> bool:
    """First character a letter, the rest letters or digits."""
    if not token or not token[0].isalpha():
        return False
    return all(c.isalnum() for c in token[1:])


def int_value(expr: SExp) -> int:
    return int(expr.token)


def boolean(value: bool) -> Atom:
    return T if value else NIL


# -------------------------------
# Construction
# -------------------------------
def cons(first: SExp, rest: SExp) -> Pair:
    return Pair(first, rest)


def from_int(value: int) -> Atom:
    return Atom(str(value))


def make_list(items: Iterable[SExp], tail: SExp = NIL) -> SExp:
    """Build a list from `items`, terminated by `tail` (NIL for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


# -------------------------------
# Traversal
# -------------------------------
def length(expr: SExp) -> int:
    """0 for NIL, 1 for any other atom, else 1 + length(rest)."""
    n = 0
    while isinstance(expr, Pair):
        n += 1
        expr = expr.rest
    if is_null(expr):
        return n
    return n + 1


def to_list(expr: SExp) -> Optional[list[SExp]]:
    """Elements of a proper list, or None if `expr` is not one.

    NIL is the empty proper list.
    """
    items: list[SExp] = []
    while isinstance(expr, Pair):
        items.append(expr.first)
        expr = expr.rest
    if not is_null(expr):
        return None
    return items
