"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing: input is pulled one line at a time, so an
  interactive stream is never read past the expression being parsed.
- Emits the two-variant expression model (Atom | Pair):

    - ()            -> NIL
    - (a . b)       -> Pair(a, b)
    - (a b c)       -> Pair(a, Pair(b, Pair(c, NIL)))
    - (a b . c)     -> Pair(a, Pair(b, c))
    - anything else -> Atom(token), token kept verbatim

  Tokens are separated by spaces, tabs, carriage returns and newlines.
  '(' and ')' always stand alone. '.' stands alone when it starts a token;
  inside a symbol ("A.B", "3.14") it is part of the symbol.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional, TextIO, Union

from dotlisp.errors import MalformedInput
from dotlisp.types.sexp import SExp, Atom, NIL, make_list


TOKEN_RE = re.compile(
    r"[ \t\r\n]*(?:"
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<dot>\.)"  # . at the start of a token
    r"|(?P<symbol>[^ \t\r\n()]+)"  # fallback: symbols and integers
    r")"
)

Token = tuple[str, str]
Source = Union[str, TextIO, Iterable[str]]


def _lines(source: Source) -> Iterator[str]:
    if isinstance(source, str):
        yield source
        return
    readline = getattr(source, "readline", None)
    if readline is not None:
        # Iterating a TextIO may read ahead; readline never does
        yield from iter(readline, "")
        return
    yield from source


def lex(source: Source) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    for line in _lines(source):
        pos = 0
        n = len(line)
        while pos < n:
            m = TOKEN_RE.match(line, pos)
            if not m:
                # only whitespace left on this line
                break
            pos = m.end()
            yield m.lastgroup, m.group(m.lastgroup)


class TokenStream:
    """Parser over a token iterator with one token of push-back."""

    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.pushed: Optional[Token] = None

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if self.pushed is None:
            tok = next(self.tokens, None)
            if tok is None:
                return None, None
            self.pushed = tok
        return self.pushed

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.pushed is not None:
            tok, self.pushed = self.pushed, None
            return tok
        return next(self.tokens, (None, None))

    def push_back(self, tok: Token) -> None:
        if self.pushed is not None:
            raise RuntimeError("only one token of push-back is supported")
        self.pushed = tok

    def parse_expr(self) -> Optional[SExp]:
        """Read one expression, or return None at end of input.

        Nesting is tracked on an explicit stack of open lists, so input
        depth is bounded by memory rather than the Python call stack.
        """
        stack: list[_OpenList] = []
        while True:
            tok_type, tok_val = self.advance()

            if not stack:
                if tok_type is None:
                    return None
                if tok_type in ("rparen", "dot"):
                    raise MalformedInput(f"'{tok_val}' is a bad s-expression")
            else:
                top = stack[-1]
                if tok_type is None:
                    raise MalformedInput(_EOF_MESSAGES[top.state])
                if top.state == _CLOSE:
                    if tok_type == "dot":
                        raise MalformedInput("misplaced '.'")
                    if tok_type != "rparen":
                        raise MalformedInput(f"expected ')' after dotted pair, found '{tok_val}'")
                elif tok_type == "dot":
                    # (. a) and (a . . b)
                    if top.state == _TAIL or not top.items:
                        raise MalformedInput("'.' is a bad s-expression")
                    top.state = _TAIL
                    continue
                elif tok_type == "rparen" and top.state == _TAIL:
                    raise MalformedInput("')' is a bad s-expression")

            if tok_type == "lparen":
                stack.append(_OpenList())
                continue

            if tok_type == "rparen":
                done = stack.pop()
                value = make_list(done.items, done.tail)
            else:
                value = Atom(tok_val)

            # hand the finished expression to the enclosing list, if any
            if not stack:
                return value
            top = stack[-1]
            if top.state == _TAIL:
                top.tail = value
                top.state = _CLOSE
            else:
                top.items.append(value)

    def parse_all(self) -> Iterator[SExp]:
        while (expr := self.parse_expr()) is not None:
            yield expr


# states of a list still being read
_ITEMS = "items"  # reading elements, or ')' to close
_TAIL = "tail"  # just read '.', the tail expression comes next
_CLOSE = "close"  # tail read, only ')' may follow

_EOF_MESSAGES = {
    _ITEMS: "unexpected end of input, expected ')'",
    _TAIL: "unexpected end of input after '.'",
    _CLOSE: "unexpected end of input, expected ')' after dotted pair",
}


class _OpenList:
    __slots__ = ("items", "tail", "state")

    def __init__(self):
        self.items: list[SExp] = []
        self.tail: SExp = NIL
        self.state = _ITEMS


def read(stream: Union[TokenStream, Source]) -> Optional[SExp]:
    """Read one expression from `stream`; None signals end of input.

    Pass a TokenStream to read successive expressions from the same input.
    """
    if not isinstance(stream, TokenStream):
        stream = TokenStream(lex(stream))
    return stream.parse_expr()


def read_all(source: Source) -> list[SExp]:
    return list(TokenStream(lex(source)).parse_all())
