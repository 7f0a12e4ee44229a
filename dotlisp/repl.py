"""
Top-level read loop for dotlisp.

Protocol, one session per input stream:
- Before each read, write the prompt (unless prompting is off).
- Each successfully evaluated form is printed on one line.
- A failed form prints one line: the error prefix followed by the reason.
- End of input ends the session without further output.

Definitions made by earlier forms survive later errors, since the same
Interpreter is kept for the whole session.
"""

from __future__ import annotations

import logging
from typing import TextIO

from dotlisp.config import Settings
from dotlisp.errors import DotLispError
from dotlisp.interpreter import Interpreter
from dotlisp.printer import render
from dotlisp.reader.parser import lex, TokenStream

logger = logging.getLogger(__name__)


class Repl:
    def __init__(
        self,
        interp: Interpreter | None = None,
        settings: Settings | None = None,
        prompt: bool = True,
    ):
        self.interp = interp if interp is not None else Interpreter()
        self.settings = settings if settings is not None else Settings()
        self.prompt = prompt

    def run(self, stdin: TextIO, stdout: TextIO) -> int:
        stream = TokenStream(lex(stdin))
        count = 0
        while True:
            if self.prompt:
                stdout.write(self.settings.prompt)
                stdout.flush()
            try:
                expr = stream.parse_expr()
                if expr is None:
                    break
                result = self.interp.eval_expr(expr)
                stdout.write(render(result, self.settings.notation) + "\n")
            except DotLispError as ex:
                logger.debug("Form failed with %s: %s", type(ex).__name__, ex)
                stdout.write(f"{self.settings.error_prefix}{ex}\n")
            count += 1
        logger.debug("End of input after %d form(s)", count)
        return 0
