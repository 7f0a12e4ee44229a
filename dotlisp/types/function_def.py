"""User-defined function representation and argument binding for dotlisp."""

from __future__ import annotations

from io import StringIO

from dotlisp.types.environment import Environment
from dotlisp.types.sexp import SExp, Atom, make_list
from dotlisp.errors import ArityMismatch


class UserFunction:
    """A global, named, first-order function created by DEFUN."""

    __slots__ = ("name", "formals", "body")

    def __init__(self, name: Atom, formals: tuple[Atom, ...], body: SExp):
        self.name: Atom = name
        self.formals: tuple[Atom, ...] = tuple(formals)
        self.body: SExp = body

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        from dotlisp.printer import to_list_notation
        with StringIO() as buffer:
            buffer.write("(DEFUN ")
            buffer.write(self.name.token)
            buffer.write(" ")
            buffer.write(to_list_notation(make_list(self.formals)))
            buffer.write(" ")
            buffer.write(to_list_notation(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<UserFunction {self.name.token}/{self.arity}>"

    def extend_env(self, args: list[SExp], caller_env: Environment) -> Environment:
        """
        Bind the evaluated arguments to this function's formal parameters and
        return a new Environment for evaluating the body.

        The caller's environment is extended, not copied or mutated: bindings
        made here are invisible once the call returns.
        """
        if len(args) != self.arity:
            raise ArityMismatch(self.name.token, self.arity, len(args))
        return caller_env.extend((f.token for f in self.formals), args)
