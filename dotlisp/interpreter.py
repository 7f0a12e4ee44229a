from __future__ import annotations
from typing import Callable

from dotlisp import SExpression, LispValue
from dotlisp.reader.parser import Source, lex, TokenStream
from dotlisp.types.sexp import NIL
from dotlisp.types.environment import Environment
from dotlisp.types.definitions import DefinitionsTable
from dotlisp.errors import RecursionDepthExceeded


class Interpreter:
    """
    Orchestrates reading and evaluating dotlisp code via a pluggable evaluator.
    Owns the session state: the definitions table, which accumulates across
    calls, and the ambient environment, which stays empty.
    """

    def __init__(
        self,
        eval_fn: Callable[[SExpression, Environment, DefinitionsTable, bool], LispValue] | None = None,
        prelude: str | None = None,
    ):
        if eval_fn is None:
            from dotlisp.evaluation.evaluator import evaluate
            eval_fn = evaluate
        self.eval_fn = eval_fn
        self.env: Environment = Environment()
        self.defs: DefinitionsTable = DefinitionsTable()

        if prelude:
            self.eval_prelude(prelude)

    def eval_expr(self, expr: SExpression) -> LispValue:
        """Evaluate one top-level form."""
        try:
            return self.eval_fn(expr, self.env, self.defs, True)
        except RecursionError:
            raise RecursionDepthExceeded() from None

    def eval_prelude(self, code: Source) -> None:
        stream = TokenStream(lex(code))
        while (expr := stream.parse_expr()) is not None:
            self.eval_expr(expr)

    def eval(self, code: Source) -> LispValue | list[LispValue]:
        stream = TokenStream(lex(code))
        results: list[LispValue] = []
        while (expr := stream.parse_expr()) is not None:
            results.append(self.eval_expr(expr))
        if not results:
            return NIL
        if len(results) == 1:
            return results[0]
        return results
