import pytest

from tinylisp.errors import IncompleteInput, ReaderError
from tinylisp.reader import lex, read, read_all, offset_to_line_col, TokenStream
from tinylisp.types import FALSE, Integer, Nil, Pair, Symbol, TRUE, make_list


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a", 0)]),
        ("(if #t 3 4)", [
            ("lparen", "(", 0), ("atom", "if", 1), ("atom", "#t", 4),
            ("atom", "3", 7), ("atom", "4", 9), ("rparen", ")", 10),
        ]),
        ("[a]", [("lparen", "[", 0), ("atom", "a", 1), ("rparen", "]", 2)]),
        (" ; comment\n a b", [("atom", "a", 12), ("atom", "b", 14)]),
        ("a #| block #| nested |# |# b", [("atom", "a", 0), ("atom", "b", 27)]),
        ("(a . b)", [("lparen", "(", 0), ("atom", "a", 1), ("atom", ".", 3), ("atom", "b", 5), ("rparen", ")", 6)]),
        ("", []),
        ("  \n\t ", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", Integer(123)),
        ("-45", Integer(-45)),
        ("+3", Integer(3)),
        ("#t", TRUE),
        ("#true", TRUE),
        ("#f", FALSE),
        ("#false", FALSE),
        ("nil", Nil),
        ("NIL", Nil),
        ("()", Nil),
        ("[]", Nil),
        ("if", Symbol("if")),
        ("+", Symbol("+")),
        ("-", Symbol("-")),
        ("1a", Symbol("1a")),
        ("3.14", Symbol("3.14")),
        ("#x", Symbol("#x")),
        ("(a b c)", make_list(Symbol("a"), Symbol("b"), Symbol("c"))),
        ("(a . b)", Pair(Symbol("a"), Symbol("b"))),
        ("(a b . c)", make_list(Symbol("a"), Symbol("b"), tail=Symbol("c"))),
        ("(a . (b))", make_list(Symbol("a"), Symbol("b"))),
        ("(a [b c])", make_list(Symbol("a"), make_list(Symbol("b"), Symbol("c")))),
        ("(if #t 3 4)", make_list(Symbol("if"), TRUE, Integer(3), Integer(4))),
        ("(())", make_list(Nil)),
    ]
)
def test_parser(source, expected):
    assert read(source) == expected


def test_read_all_is_lazy_and_ordered():
    exprs = read_all("1 (if #f 2 3) ; trailing\n x")
    assert next(exprs) == Integer(1)
    assert list(exprs) == [make_list(Symbol("if"), FALSE, Integer(2), Integer(3)), Symbol("x")]


def test_token_stream_returns_none_at_end():
    stream = TokenStream(lex("  ; only a comment"))
    assert stream.parse_expr() is None


@pytest.mark.parametrize(
    "source, position",
    [
        (")", 0),
        ("(a ]", 3),
        ("(. a)", 1),
        ("(a . )", 5),
        ("(a . b c)", 7),
        ("(a . b . c)", 7),
        ("1 2", 2),
    ]
)
def test_syntax_errors(source, position):
    with pytest.raises(ReaderError) as excinfo:
        read(source)
    assert not isinstance(excinfo.value, IncompleteInput)
    assert excinfo.value.position == position


@pytest.mark.parametrize("source", ["(a", "(a (b c)", "[", "#| open", "(a . "])
def test_incomplete_input(source):
    with pytest.raises(IncompleteInput):
        read(source)


def test_empty_input_is_an_error():
    with pytest.raises(ReaderError):
        read("   ")


def test_deeply_nested_input_reads_without_recursion():
    depth = 50_000
    expr = read("(" * depth + ")" * depth)
    for _ in range(depth - 1):
        assert isinstance(expr, Pair) and expr.tail is Nil
        expr = expr.head
    assert expr is Nil


def test_offset_to_line_col():
    text = "ab\ncd\n\nef"
    assert offset_to_line_col(text, 0) == (0, 0)
    assert offset_to_line_col(text, 4) == (1, 1)
    assert offset_to_line_col(text, 7) == (3, 0)
    assert offset_to_line_col(text, 8) == (3, 1)


def test_oversized_integer_literal_is_reader_error():
    source = "(a " + "1" * 5000 + ")"
    with pytest.raises(ReaderError, match="Integer literal too large") as excinfo:
        read(source)
    assert excinfo.value.position == 3


def test_large_integer_below_conversion_limit_reads():
    assert read("9" * 300) == Integer(int("9" * 300))
