from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from dotlisp.types.function_def import UserFunction

logger = logging.getLogger(__name__)


@dataclass
class DefinitionsTable:
    """Function name -> UserFunction, most recent definition first.

    Names compare case-insensitively. A later DEFUN of the same name shadows
    the earlier one; nothing is ever removed.
    """
    _latest: Dict[str, UserFunction] = field(default_factory=dict)
    _history: List[UserFunction] = field(default_factory=list)

    def add(self, fn: UserFunction) -> UserFunction:
        key = fn.name.token.upper()
        if key in self._latest:
            logger.debug("DEFUN %s shadows an earlier definition", fn.name.token)
        self._latest[key] = fn
        self._history.append(fn)
        return fn

    def get(self, name: str) -> Optional[UserFunction]:
        return self._latest.get(name.upper())

    def __contains__(self, name: str) -> bool:
        return name.upper() in self._latest

    def __len__(self) -> int:
        return len(self._history)

    def __iter__(self) -> Iterator[UserFunction]:
        """Every definition ever added, most recent first."""
        return reversed(self._history)
