import io

import pytest
from hypothesis import given, strategies as st

from dotlisp.errors import MalformedInput
from dotlisp.printer import to_dot_notation, to_list_notation
from dotlisp.reader.parser import lex, read, read_all, TokenStream
from dotlisp.types.sexp import Atom, Pair, NIL, make_list


def A(token):
    return Atom(token)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ("(a . b)", [("lparen", "("), ("symbol", "a"), ("dot", "."), ("symbol", "b"), ("rparen", ")")]),
        ("(a.b)", [("lparen", "("), ("symbol", "a.b"), ("rparen", ")")]),
        (".5", [("dot", "."), ("symbol", "5")]),
        ("-12", [("symbol", "-12")]),
        ("()", [("lparen", "("), ("rparen", ")")]),
        ("a\tb\nc", [("symbol", "a"), ("symbol", "b"), ("symbol", "c")]),
        ("a\x0cb", [("symbol", "a\x0cb")]),
        ("a\r\nb", [("symbol", "a"), ("symbol", "b")]),
        ("(PLUS 1(TIMES 2 3))", [("lparen", "("), ("symbol", "PLUS"), ("symbol", "1"), ("lparen", "("),
                                 ("symbol", "TIMES"), ("symbol", "2"), ("symbol", "3"), ("rparen", ")"),
                                 ("rparen", ")")]),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize("source", ["", "    ", "\n\n", " \t \n "])
def test_lexer_whitespace_only(source):
    assert list(lex(source)) == []


def test_lexer_reads_text_streams_line_by_line():
    tokens = list(lex(io.StringIO("(a\n b)\n")))
    assert tokens == [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("rparen", ")")]


def test_reader_does_not_read_past_the_current_expression():
    class RecordingInput:
        def __init__(self, lines):
            self.lines = list(lines)
            self.calls = 0

        def readline(self):
            self.calls += 1
            return self.lines.pop(0) if self.lines else ""

    source = RecordingInput(["1\n", "2\n", "3\n"])
    stream = TokenStream(lex(source))
    assert stream.parse_expr() == A("1")
    assert source.calls == 1
    assert stream.parse_expr() == A("2")
    assert source.calls == 2


@pytest.mark.parametrize(
    "source, expected",
    [
        ("a", A("a")),
        ("123", A("123")),
        ("nil", A("nil")),
        ("(a . b)", Pair(A("a"), A("b"))),
        ("(a b c)", make_list([A("a"), A("b"), A("c")])),
        ("(a . (b . NIL))", make_list([A("a"), A("b")])),
        ("((a . b) c)", make_list([Pair(A("a"), A("b")), A("c")])),
        ("((a b) (c d))", make_list([make_list([A("a"), A("b")]), make_list([A("c"), A("d")])])),
        ("(a ())", make_list([A("a"), NIL])),
        ("(a b . c)", Pair(A("a"), Pair(A("b"), A("c")))),
        ("(a b . (c))", make_list([A("a"), A("b"), A("c")])),
        ("((a) . (b . c))", Pair(make_list([A("a")]), Pair(A("b"), A("c")))),
        ("(\n  DEFUN F (X)\n  X)", make_list([A("DEFUN"), A("F"), make_list([A("X")]), A("X")])),
    ]
)
def test_parser(source, expected):
    assert read(source) == expected


def test_empty_list_reads_as_nil_singleton():
    assert read("()") is NIL
    assert read("( \n )") is NIL


def test_atoms_are_kept_verbatim():
    expr = read("nil")
    assert expr is not NIL
    assert expr.token == "nil"


def test_end_of_input_is_not_an_error():
    assert read("") is None
    assert read("   \n") is None


def test_parse_all_reads_successive_expressions():
    assert read_all("1 (a) b") == [A("1"), make_list([A("a")]), A("b")]


@pytest.mark.parametrize(
    "source, message",
    [
        (")", "bad s-expression"),
        (".", "bad s-expression"),
        ("(. a)", "bad s-expression"),
        ("(a . )", "bad s-expression"),
        ("(a . . b)", "bad s-expression"),
        ("(a . b c)", "expected ')'"),
        ("(a . b . c)", "misplaced '.'"),
        ("(a b . c d)", "expected ')'"),
        ("(a b . )", "bad s-expression"),
        ("(a b", "end of input"),
        ("(", "end of input"),
        ("(a .", "end of input"),
        ("(a . b", "end of input"),
    ]
)
def test_malformed_input(source, message):
    with pytest.raises(MalformedInput) as excinfo:
        read(source)
    assert message in str(excinfo.value)


def test_reading_continues_after_a_parse_error():
    stream = TokenStream(lex(") 7"))
    with pytest.raises(MalformedInput):
        stream.parse_expr()
    assert stream.parse_expr() == A("7")
    assert stream.parse_expr() is None


def test_push_back_holds_a_single_token():
    stream = TokenStream(lex("a b"))
    tok = stream.advance()
    stream.push_back(tok)
    assert stream.peek() == ("symbol", "a")
    with pytest.raises(RuntimeError):
        stream.push_back(("symbol", "b"))


# -------------------------------
# Strategies
# -------------------------------
atom_strat = st.from_regex(r"[A-Za-z0-9+*-]{1,8}", fullmatch=True).map(Atom)

sexp_strat = st.recursive(
    atom_strat,
    lambda children: st.builds(Pair, children, children),
    max_leaves=25,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(sexp_strat)
def test_dot_notation_round_trip(expr):
    assert read(to_dot_notation(expr)) == expr


@given(st.lists(atom_strat, max_size=8))
def test_list_notation_round_trip_for_flat_lists(items):
    expr = make_list(items)
    assert read(to_list_notation(expr)) == expr


@given(st.recursive(
    atom_strat.filter(lambda a: a.token.upper() != "NIL"),
    lambda children: st.builds(Pair, children, children),
    max_leaves=25,
))
def test_list_notation_round_trip_for_dotted_tails(expr):
    assert read(to_list_notation(expr)) == expr


def test_reader_handles_deep_nesting():
    depth = 5000
    expr = read("(" * depth + "a" + ")" * depth)
    for _ in range(depth):
        assert isinstance(expr, Pair) and expr.rest is NIL
        expr = expr.first
    assert expr == A("a")
