# Core type aliases for the dotlisp data model.
# Code and data share one representation: the two-variant expression type
# defined in dotlisp.types.sexp (Atom | Pair).
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to the same union and are interchangeable.

from typing import Callable

from dotlisp.types.sexp import Atom, Pair, T, NIL

SExpression = Atom | Pair
LispValue = SExpression

# Evaluator function type: passed to special forms and apply
EvaluatorFn = Callable[..., LispValue]

__all__ = ["Atom", "Pair", "T", "NIL", "SExpression", "LispValue", "EvaluatorFn"]
