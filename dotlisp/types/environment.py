"""Runtime environment for dotlisp.

The environment is an association list: an ordered chain of
(symbol, value) bindings, most recent first. Extending it returns a new
chain whose tail is the old one, so a call frame's bindings are never
visible to its caller or to sibling calls. Lookup is case-insensitive.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, Optional

from dotlisp.errors import UnboundIdentifier
from dotlisp.types.sexp import SExp


class Environment:
    """Persistent association list of identifier bindings."""

    __slots__ = ("name", "key", "value", "outer")

    def __init__(
        self,
        name: Optional[str] = None,
        value: Optional[SExp] = None,
        outer: Optional[Environment] = None,
    ):
        # A node without a name is the empty environment
        self.name: Optional[str] = name
        self.key: Optional[str] = name.upper() if name is not None else None
        self.value: Optional[SExp] = value
        self.outer: Optional[Environment] = outer

    def is_empty(self) -> bool:
        return self.name is None

    def bind(self, name: str, value: SExp) -> Environment:
        """Return a new environment with `name` bound in front of this one."""
        return Environment(name, value, self if not self.is_empty() else None)

    def extend(self, names: Iterable[str], values: Iterable[SExp]) -> Environment:
        """Prepend (name, value) bindings pairwise, in order.

        The last pair ends up first, which only matters for duplicate
        parameter names: the later one wins, as with repeated prepending.
        """
        env = self
        for name, value in zip(names, values):
            env = env.bind(name, value)
        return env

    def bindings(self) -> Iterator[tuple[str, SExp]]:
        env: Optional[Environment] = self
        while env is not None and not env.is_empty():
            yield env.name, env.value
            env = env.outer

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest binding node for `name`."""
        key = name.upper()
        env: Optional[Environment] = self
        while env is not None and not env.is_empty():
            if env.key == key:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> SExp:
        """Look up the value bound to `name`.

        Raises UnboundIdentifier if not found.
        """
        env = self.find(name)
        if env is None:
            raise UnboundIdentifier(name)
        return env.value

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self.bindings())

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self.bindings()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
