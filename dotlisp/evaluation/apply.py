"""Application engine for dotlisp.

Centralizes what happens once a call's arguments have been evaluated:
- Primitives are dispatched through the closed Primitive enumeration.
- User functions are re-fetched from the definitions table, their
  parameters bound by extending the caller's environment, and their body
  evaluated with top_level=False so a nested DEFUN is rejected.
"""

import logging

from dotlisp import LispValue, EvaluatorFn
from dotlisp.types.sexp import Atom
from dotlisp.types.environment import Environment
from dotlisp.types.definitions import DefinitionsTable
from dotlisp.types.function_def import UserFunction
from dotlisp.errors import UndefinedFunction
from dotlisp.evaluation.primitives import Primitive, apply_primitive

logger = logging.getLogger(__name__)


def apply_user_function(
    fn: UserFunction,
    args: list[LispValue],
    env: Environment,
    defs: DefinitionsTable,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a user function to already-evaluated arguments.

    Raises ArityMismatch if the argument count differs from the parameter count.
    """
    new_env = fn.extend_env(args, env)
    logger.debug("APPLY %s with %s", fn.name.token, new_env)
    return evaluate_fn(fn.body, new_env, defs, False)


def apply(
    head: Atom,
    args: list[LispValue],
    env: Environment,
    defs: DefinitionsTable,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply the primitive or user function named by `head` to `args`."""
    prim = Primitive.lookup(head.token)
    if prim is not None:
        return apply_primitive(prim, args)
    fn = defs.get(head.token)
    if fn is None:
        raise UndefinedFunction(head.token)
    return apply_user_function(fn, args, env, defs, evaluate_fn)
