"""Interactive read-evaluate-print loop.

Lines are collected until they hold only complete expressions, then each
expression is evaluated in order and its value printed. Errors are reported
and the loop continues with the environment from before the failing
expression. ``,quit`` or end of input leaves the loop.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from rich.console import Console

from tinylisp.config import Settings, get_settings
from tinylisp.errors import IncompleteInput, TinyLispError
from tinylisp.interpreter import Interpreter
from tinylisp.printer import to_string
from tinylisp.reader.parser import lex, TokenStream

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {",quit", ",q", ",exit"}


def run_repl(
    interp: Optional[Interpreter] = None,
    settings: Optional[Settings] = None,
    console: Optional[Console] = None,
    read_line: Optional[Callable[[str], str]] = None,
) -> Interpreter:
    """Run the loop until EOF or a quit command; returns the session."""
    interp = interp or Interpreter()
    settings = settings or get_settings()
    console = console or Console(highlight=False)
    read_line = read_line or (lambda prompt: console.input(prompt, markup=False))

    buffer = ""
    while True:
        prompt = settings.continuation_prompt if buffer else settings.prompt
        try:
            line = read_line(prompt)
        except EOFError:
            if buffer.strip():
                console.print("error: unexpected end of input", style="red", markup=False)
            break
        except KeyboardInterrupt:
            # Ctrl-C drops the partial input but keeps the session
            console.print()
            buffer = ""
            continue

        if not buffer and line.strip() in QUIT_COMMANDS:
            break

        buffer = f"{buffer}\n{line}" if buffer else line
        try:
            exprs = list(TokenStream(lex(buffer)).parse_all())
        except IncompleteInput:
            continue
        except TinyLispError as ex:
            console.print(f"error: {ex}", style="red", markup=False)
            buffer = ""
            continue
        buffer = ""

        for expr in exprs:
            try:
                value = interp.eval_expr(expr)
            except TinyLispError as ex:
                logger.debug("evaluation failed: %s", ex)
                console.print(f"error: {ex}", style="red", markup=False)
                break
            console.print(to_string(value), markup=False)

    return interp
