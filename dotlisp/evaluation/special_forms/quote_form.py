from dotlisp import SExpression, LispValue, EvaluatorFn
from dotlisp.types.sexp import length, to_list
from dotlisp.types.environment import Environment
from dotlisp.types.definitions import DefinitionsTable
from dotlisp.errors import ArityMismatch


def quote_form(
    tail: SExpression,
    env: Environment,
    defs: DefinitionsTable,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """(QUOTE x) returns x unevaluated."""
    operands = to_list(tail)
    if operands is None or len(operands) != 1:
        raise ArityMismatch("QUOTE", 1, length(tail))
    return operands[0]
