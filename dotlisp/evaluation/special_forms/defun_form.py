import logging

from dotlisp import SExpression, LispValue, EvaluatorFn
from dotlisp.types.sexp import Atom, is_valid_identifier, to_list
from dotlisp.types.environment import Environment
from dotlisp.types.definitions import DefinitionsTable
from dotlisp.types.function_def import UserFunction
from dotlisp.errors import MalformedDefun, NestedDefunForbidden
from dotlisp.evaluation.primitives import Primitive

logger = logging.getLogger(__name__)


def validate_defun(tail: SExpression) -> UserFunction:
    """Check (name (params...) body) and build the function it describes.

    Nothing is registered here, so a malformed DEFUN leaves the table untouched.
    """
    operands = to_list(tail)
    if operands is None or len(operands) != 3:
        raise MalformedDefun("function definition is not in good form")
    name, params, body = operands

    if not isinstance(name, Atom) or not is_valid_identifier(name.token):
        raise MalformedDefun("function name is bad")

    # () reads as NIL: a function of no arguments
    formals = to_list(params)
    if formals is None:
        raise MalformedDefun("parameter list is bad")
    for par in formals:
        if not isinstance(par, Atom) or not is_valid_identifier(par.token):
            from dotlisp.printer import to_list_notation
            raise MalformedDefun(f"'{to_list_notation(par)}' is a bad parameter")

    return UserFunction(name, tuple(formals), body)


def defun_form(
    tail: SExpression,
    env: Environment,
    defs: DefinitionsTable,
    evaluate_fn: EvaluatorFn,
    top_level: bool,
) -> LispValue:
    """
    (DEFUN name (params...) body)
    Only allowed at top level; returns the function name.
    """
    if not top_level:
        raise NestedDefunForbidden()
    fn = validate_defun(tail)
    if Primitive.lookup(fn.name.token) is not None:
        logger.warning("DEFUN %s is shadowed by the primitive of the same name", fn.name.token)
    defs.add(fn)
    logger.debug("Defined %s", fn)
    return fn.name
