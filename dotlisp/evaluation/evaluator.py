"""Core evaluator for the dotlisp interpreter.

eval, evlis and the dispatch between special forms, primitives and user
functions. The evaluator is plain structural recursion over Atom | Pair;
there is no tail-call elimination, so very deep recursion raises
RecursionError, which the interpreter session turns into an error line.
"""

from __future__ import annotations

from dotlisp import SExpression, LispValue
from dotlisp.types.sexp import Atom, Pair, T, NIL, is_integer, is_valid_identifier, to_list
from dotlisp.types.environment import Environment
from dotlisp.types.definitions import DefinitionsTable
from dotlisp.errors import BadArguments, IllegalFunctionName, InvalidIdentifier, UndefinedFunction
from dotlisp.evaluation.apply import apply
from dotlisp.evaluation.primitives import Primitive
from dotlisp.evaluation.special_forms import SPECIAL_FORMS


def evaluate(
    expr: SExpression,
    env: Environment,
    defs: DefinitionsTable,
    top_level: bool = True,
) -> LispValue:
    """
    Evaluate `expr` in `env`. `top_level` is True only for a form read
    directly by the session; everything evaluated on its behalf gets False.
    """
    match expr:
        case Atom():
            return evaluate_atom(expr, env)

        case Pair(first=head, rest=operands):
            if not isinstance(head, Atom):
                from dotlisp.printer import to_list_notation
                raise IllegalFunctionName(to_list_notation(head))

            form = SPECIAL_FORMS.get(head.token.upper())
            if form is not None:
                return form(operands, env, defs, evaluate, top_level)

            if Primitive.lookup(head.token) is None and head.token not in defs:
                raise UndefinedFunction(head.token)

            args = evlis(head, operands, env, defs)
            return apply(head, args, env, defs, evaluate)

    raise TypeError(f"Cannot evaluate {expr!r}")


def evaluate_atom(expr: Atom, env: Environment) -> LispValue:
    if is_integer(expr):
        return expr
    token = expr.token.upper()
    if token == "T":
        return T
    if token == "NIL":
        return NIL
    if not is_valid_identifier(expr.token):
        raise InvalidIdentifier(expr.token)
    return env.lookup(expr.token)


def evlis(
    head: Atom,
    operands: SExpression,
    env: Environment,
    defs: DefinitionsTable,
) -> list[LispValue]:
    """Evaluate each operand, left to right, in the caller's environment."""
    items = to_list(operands)
    if items is None:
        raise BadArguments(head.token)
    return [evaluate(item, env, defs, False) for item in items]
