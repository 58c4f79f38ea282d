"""
  tinylisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits expression values directly:

    - 42, -7, +3          -> Integer
    - #t #true / #f #false -> Boolean
    - nil, ()             -> Nil
    - (a b c)             -> Pair chain ending in Nil
    - (a b . c)           -> Pair chain ending in c
    - anything else       -> Symbol

- ( ) and [ ] are interchangeable but must close their own kind
- ; line comments and nestable #| block |# comments

Lists are built with an explicit stack, so deeply nested input does not hit
Python's recursion limit.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Optional

from tinylisp import SExpression
from tinylisp.errors import IncompleteInput, ReaderError
from tinylisp.types.atoms import Integer, TRUE, FALSE
from tinylisp.types.nil import Nil
from tinylisp.types.pair import make_list
from tinylisp.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<ml_start>#\|)"  # multi-line comment start
    r"|(?P<lparen>[(\[])"  # ( or [
    r"|(?P<rparen>[)\]])"  # ) or ]
    r"|(?P<atom>[^\s()\[\];]+)"  # integers, booleans, symbols, the dot
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"[+-]?[0-9]+\Z")

BOOLEANS = {
    "#t": TRUE,
    "#true": TRUE,
    "#f": FALSE,
    "#false": FALSE,
}

CLOSERS = {"(": ")", "[": "]"}

Token = tuple[str, str, int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)

    def skip_whitespace_and_comments():
        nonlocal pos
        while pos < n:
            if source[pos].isspace():
                pos += 1
                continue
            match = TOKEN_RE.match(source, pos)
            if match is None:
                return
            if match.group("comment"):
                pos = match.end()
            elif match.group("ml_start"):
                start = match.start("ml_start")
                pos = match.end()
                depth = 1
                while depth > 0:
                    if pos >= n:
                        raise IncompleteInput("Unterminated block comment", start)
                    if source.startswith("#|", pos):
                        depth += 1
                        pos += 2
                    elif source.startswith("|#", pos):
                        depth -= 1
                        pos += 2
                    else:
                        pos += 1
            else:
                return

    while pos < n:
        skip_whitespace_and_comments()
        if pos >= n:
            break

        m = TOKEN_RE.match(source, pos)
        if not m:
            raise ReaderError(f"Unexpected character {source[pos]!r}", pos)
        for nm in ("lparen", "rparen", "atom"):
            if m.group(nm):
                yield nm, m.group(nm), m.start(nm)
                pos = m.end()
                break


def parse_atom(text: str, position: Optional[int] = None) -> SExpression:
    if INTEGER_RE.match(text):
        try:
            return Integer(int(text))
        except ValueError as ex:
            # int() refuses strings past sys.get_int_max_str_digits()
            raise ReaderError(f"Integer literal too large: {ex}", position) from None
    if text in BOOLEANS:
        return BOOLEANS[text]
    if text.lower() == "nil":
        return Nil
    return Symbol(text)


@dataclass
class _OpenList:
    opener: str
    position: int
    items: list[SExpression] = field(default_factory=list)
    dotted: bool = False
    tail: Optional[SExpression] = None


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> Optional[SExpression]:
        """Read the next complete expression, or None at end of input."""
        stack: list[_OpenList] = []
        while True:
            tok = self.advance()
            if tok is None:
                if stack:
                    raise IncompleteInput(
                        f"Unexpected end of input: unclosed {stack[-1].opener!r}",
                        stack[-1].position,
                    )
                return None
            tok_type, tok_val, pos = tok

            if tok_type == "lparen":
                stack.append(_OpenList(tok_val, pos))
                continue

            if tok_type == "rparen":
                if not stack:
                    raise ReaderError(f"Unexpected {tok_val!r}", pos)
                frame = stack.pop()
                if CLOSERS[frame.opener] != tok_val:
                    raise ReaderError(
                        f"Mismatched {tok_val!r}: list opened with {frame.opener!r} "
                        f"at offset {frame.position}",
                        pos,
                    )
                if frame.dotted and frame.tail is None:
                    raise ReaderError("Expected an expression after '.'", pos)
                value = make_list(*frame.items, tail=Nil if frame.tail is None else frame.tail)
            elif tok_val == ".":
                if not stack or not stack[-1].items or stack[-1].dotted:
                    raise ReaderError("Unexpected '.'", pos)
                stack[-1].dotted = True
                continue
            else:
                value = parse_atom(tok_val, pos)

            if not stack:
                return value
            frame = stack[-1]
            if frame.dotted:
                if frame.tail is not None:
                    raise ReaderError("Expected ')' after dotted tail", pos)
                frame.tail = value
            else:
                frame.items.append(value)

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read_all(source: str) -> Iterator[SExpression]:
    """Lazily yield every expression in `source`."""
    return TokenStream(lex(source)).parse_all()


def read(source: str) -> SExpression:
    """Read exactly one expression from `source`."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if expr is None:
        raise ReaderError("No expression to read")
    extra = stream.peek()
    if extra is not None:
        raise ReaderError("Unexpected input after expression", extra[2])
    return expr


def offset_to_line_col(source: str, offset: int) -> tuple[int, int]:
    """Zero-based (line, column) of a character offset."""
    line = source.count("\n", 0, offset)
    col = offset - (source.rfind("\n", 0, offset) + 1)
    return line, col
