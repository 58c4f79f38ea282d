"""Static checks for tinylisp documents, independent of any LSP library.

Evaluation is pure (no I/O, no shared state), so the checker simply reads and
evaluates each top-level form with a fresh session and reports what fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from tinylisp.errors import EvalError, ReaderError, TypeMismatch
from tinylisp.interpreter import Interpreter
from tinylisp.printer import to_string
from tinylisp.reader.parser import lex, offset_to_line_col, parse_atom, TokenStream
from tinylisp.types.atoms import Boolean, Integer
from tinylisp.types.nil import NilType
from tinylisp.types.symbol import Symbol

ERROR = "error"
WARNING = "warning"


@dataclass(frozen=True)
class Problem:
    line: int
    col: int
    message: str
    severity: str = ERROR


@dataclass(frozen=True)
class FormResult:
    line: int
    col: int
    text: str


@dataclass
class Analysis:
    problems: List[Problem]
    results: List[FormResult]


def analyze(text: str) -> Analysis:
    problems: List[Problem] = []
    results: List[FormResult] = []
    interp = Interpreter()
    stream = TokenStream(lex(text))

    while True:
        try:
            first = stream.peek()
            expr = stream.parse_expr()
        except ReaderError as ex:
            # The reader cannot resynchronize; stop at the first syntax error
            offset = ex.position if ex.position is not None else len(text)
            line, col = offset_to_line_col(text, offset)
            problems.append(Problem(line, col, str(ex)))
            break
        if expr is None:
            break

        line, col = offset_to_line_col(text, first[2])
        try:
            value = interp.eval_expr(expr)
        except TypeMismatch as ex:
            problems.append(Problem(line, col, str(ex)))
            continue
        except EvalError as ex:
            problems.append(Problem(line, col, str(ex), WARNING))
            continue
        results.append(FormResult(line, col, to_string(value)))

    return Analysis(problems, results)


IF_DOC = (
    "(if condition consequent alternative)\n\n"
    "Evaluates condition, which must be #t or #f, then evaluates only the "
    "selected branch. Any other shape is plain data."
)


def describe_word(word: str) -> Optional[str]:
    """Hover text for a single atom."""
    if not word or word in ("(", ")", "[", "]", "."):
        return None
    if word == "if":
        return IF_DOC
    try:
        atom = parse_atom(word)
    except ReaderError:
        return None
    match atom:
        case Integer():
            return f"Integer {to_string(atom)}"
        case Boolean():
            return f"Boolean {to_string(atom)}"
        case NilType():
            return "Nil, the empty list"
        case Symbol():
            return f"Symbol {word} (evaluates to itself)"
    return None


def extract_word_at(text: str, line_no: int, character: int) -> str:
    lines = text.splitlines(True)
    if line_no >= len(lines):
        return ""
    line = lines[line_no]
    character = min(character, len(line))
    # expand to word boundaries
    start = character
    while start > 0 and line[start - 1] not in " \t()[];\n\r":
        start -= 1
    end = character
    while end < len(line) and line[end] not in " \t()[];\n\r":
        end += 1
    return line[start:end]
