"""Dot-notation and list-notation printers.

Both printers work from an explicit stack of pending pieces, where a piece
is either an expression still to print or literal text. No Python stack is
used per level of nesting, so anything the reader accepts can be printed.
"""

from __future__ import annotations

from io import StringIO

from dotlisp.types.sexp import SExp, Atom, Pair, is_null


def to_dot_notation(expr: SExp) -> str:
    """(a b) -> (a . (b . NIL)); every pair is parenthesized with its dot."""
    with StringIO() as buffer:
        _write_dot(expr, buffer)
        return buffer.getvalue()


def _write_dot(expr: SExp, buffer: StringIO) -> None:
    pending: list[SExp | str] = [expr]
    while pending:
        item = pending.pop()
        match item:
            case str():
                buffer.write(item)
            case Atom(token=token):
                buffer.write(token)
            case Pair(first=first, rest=rest):
                buffer.write("(")
                pending.extend((")", rest, " . ", first))


def to_list_notation(expr: SExp) -> str:
    """(a . (b . NIL)) -> (a b); a non-NIL final atom prints as (a . b)."""
    with StringIO() as buffer:
        _write_list(expr, buffer)
        return buffer.getvalue()


def _write_list(expr: SExp, buffer: StringIO) -> None:
    pending: list[SExp | str] = [expr]
    while pending:
        item = pending.pop()
        match item:
            case str():
                buffer.write(item)
            case Atom(token=token):
                buffer.write(token)
            case Pair():
                buffer.write("(")
                elements = []
                tail = item
                while isinstance(tail, Pair):
                    elements.append(tail.first)
                    tail = tail.rest

                pending.append(")")
                if not is_null(tail):
                    pending.extend((tail.token, " . "))
                for element in reversed(elements[1:]):
                    pending.extend((element, " "))
                pending.append(elements[0])


PRINTERS = {
    "dot": to_dot_notation,
    "list": to_list_notation,
}


def render(expr: SExp, notation: str = "dot") -> str:
    try:
        printer = PRINTERS[notation]
    except KeyError:
        raise ValueError(f"Unknown notation {notation!r}; expected one of {tuple(PRINTERS)}") from None
    return printer(expr)
