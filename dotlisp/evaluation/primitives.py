"""Built-in primitives for the dotlisp runtime.

Primitives are a closed enumeration. Each member carries its arity;
apply_primitive checks the argument count and then dispatches with an
exhaustive match, so adding a member without an implementation fails
loudly instead of falling through.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from dotlisp.types.sexp import (
    SExp,
    Atom,
    Pair,
    boolean,
    from_int,
    int_value,
    is_integer,
    is_null,
)
from dotlisp.errors import (
    ArityMismatch,
    AtomsOnly,
    DivisionByZero,
    IntegerTooLarge,
    NonIntegerOperand,
    OperandNotPair,
)


class Primitive(Enum):
    CAR = ("CAR", 1)
    CDR = ("CDR", 1)
    CONS = ("CONS", 2)
    EQ = ("EQ", 2)
    ATOM = ("ATOM", 1)
    NULL = ("NULL", 1)
    INT = ("INT", 1)
    PLUS = ("PLUS", 2)
    MINUS = ("MINUS", 2)
    TIMES = ("TIMES", 2)
    QUOTIENT = ("QUOTIENT", 2)
    REMAINDER = ("REMAINDER", 2)
    LESS = ("LESS", 2)
    GREATER = ("GREATER", 2)

    def __init__(self, label: str, arity: int):
        self.label = label
        self.arity = arity

    @classmethod
    def lookup(cls, name: str) -> Optional[Primitive]:
        """Case-insensitive lookup by name; None if `name` is not a primitive."""
        return _BY_NAME.get(name.upper())


_BY_NAME: dict[str, Primitive] = {p.label: p for p in Primitive}


# -------------------------------
# Integer helpers
# -------------------------------
def _integers(prim: Primitive, args: list[SExp]) -> list[int]:
    if not all(is_integer(a) for a in args):
        raise NonIntegerOperand(prim.label)
    try:
        return [int_value(a) for a in args]
    except ValueError:
        # int() refuses tokens past sys.get_int_max_str_digits()
        raise IntegerTooLarge(prim.label) from None


def _int_result(prim: Primitive, value: int) -> Atom:
    try:
        return from_int(value)
    except ValueError:
        raise IntegerTooLarge(prim.label) from None


def truncating_quotient(a: int, b: int) -> int:
    """Integer division rounding toward zero: -7 / 2 == -3."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def truncating_remainder(a: int, b: int) -> int:
    """Remainder with the sign of the dividend: -7 rem 2 == -1."""
    return a - b * truncating_quotient(a, b)


# -------------------------------
# List operations
# -------------------------------
def _pair_operand(prim: Primitive, expr: SExp) -> Pair:
    if not isinstance(expr, Pair):
        raise OperandNotPair(prim.label)
    return expr


def eq(a: SExp, b: SExp) -> Atom:
    if not isinstance(a, Atom) or not isinstance(b, Atom):
        raise AtomsOnly(Primitive.EQ.label)
    return boolean(a.token.upper() == b.token.upper())


# -------------------------------
# Dispatch
# -------------------------------
def apply_primitive(prim: Primitive, args: list[SExp]) -> SExp:
    if len(args) != prim.arity:
        raise ArityMismatch(prim.label, prim.arity, len(args))

    match prim:
        case Primitive.CAR:
            return _pair_operand(prim, args[0]).first
        case Primitive.CDR:
            return _pair_operand(prim, args[0]).rest
        case Primitive.CONS:
            return Pair(args[0], args[1])
        case Primitive.EQ:
            return eq(args[0], args[1])
        case Primitive.ATOM:
            return boolean(isinstance(args[0], Atom))
        case Primitive.NULL:
            return boolean(is_null(args[0]))
        case Primitive.INT:
            return boolean(is_integer(args[0]))
        case Primitive.PLUS:
            a, b = _integers(prim, args)
            return _int_result(prim, a + b)
        case Primitive.MINUS:
            a, b = _integers(prim, args)
            return _int_result(prim, a - b)
        case Primitive.TIMES:
            a, b = _integers(prim, args)
            return _int_result(prim, a * b)
        case Primitive.QUOTIENT:
            a, b = _integers(prim, args)
            if b == 0:
                raise DivisionByZero(prim.label)
            return _int_result(prim, truncating_quotient(a, b))
        case Primitive.REMAINDER:
            a, b = _integers(prim, args)
            if b == 0:
                raise DivisionByZero(prim.label)
            return _int_result(prim, truncating_remainder(a, b))
        case Primitive.LESS:
            a, b = _integers(prim, args)
            return boolean(a < b)
        case Primitive.GREATER:
            a, b = _integers(prim, args)
            return boolean(a > b)
    raise AssertionError(f"Unhandled primitive {prim}")
