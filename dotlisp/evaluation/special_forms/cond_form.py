"""Special form: COND.

(COND (test1 result1) (test2 result2) ...)

The clause list is validated as a whole before any test runs. Tests are then
evaluated left to right; the first one that yields T selects its result,
which is the only result expression ever evaluated. Running out of clauses
is an error, not NIL.
"""

from dotlisp import SExpression, LispValue, EvaluatorFn
from dotlisp.types.sexp import Atom, is_true, to_list
from dotlisp.types.environment import Environment
from dotlisp.types.definitions import DefinitionsTable
from dotlisp.errors import MalformedConditional, NoMatchingClause


def validate_clauses(tail: SExpression) -> list[tuple[SExpression, SExpression]]:
    """Return the (test, result) clauses of a COND, or raise MalformedConditional."""
    if isinstance(tail, Atom):
        raise MalformedConditional("conditional cannot be atomic")
    clauses = to_list(tail)
    if clauses is None:
        raise MalformedConditional("conditional clause list is not a proper list")

    pairs = []
    for clause in clauses:
        parts = to_list(clause) if not isinstance(clause, Atom) else None
        if parts is None or len(parts) != 2:
            raise MalformedConditional("conditional clause is not a (test result) pair")
        pairs.append((parts[0], parts[1]))
    return pairs


def evcon(
    clauses: list[tuple[SExpression, SExpression]],
    env: Environment,
    defs: DefinitionsTable,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    for test, result in clauses:
        # T itself, or a quoted atom spelled T: matched by token like EQ does
        if is_true(evaluate_fn(test, env, defs, False)):
            return evaluate_fn(result, env, defs, False)
    raise NoMatchingClause()


def cond_form(
    tail: SExpression,
    env: Environment,
    defs: DefinitionsTable,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    return evcon(validate_clauses(tail), env, defs, evaluate_fn)
