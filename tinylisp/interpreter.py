from __future__ import annotations

import logging
from typing import Mapping, Optional

from tinylisp import SExpression, LispValue
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.evaluation.special_forms import SpecialForm
from tinylisp.reader.parser import lex, TokenStream
from tinylisp.types.environment import Environment
from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A session that reads and evaluates tinylisp code.
    Carries the environment returned by each evaluation into the next one.
    """

    def __init__(
        self,
        env: Optional[Environment] = None,
        forms: Optional[Mapping[Symbol, SpecialForm]] = None,
    ):
        self.env: Environment = Environment.empty() if env is None else env
        self.forms = forms

    def eval_expr(self, expr: SExpression) -> LispValue:
        """Evaluate one already-read expression and keep its environment."""
        value, self.env = evaluate(expr, self.env, self.forms)
        return value

    def eval(self, code: str) -> LispValue:
        """Feed code to the interpreter and evaluate expressions in order.

        Returns Nil for empty input, the value for a single expression, or a
        list of values. If an expression fails, the environment stays as the
        last successful expression left it and the error propagates.
        """
        stream = TokenStream(lex(code))
        results: list[LispValue] = []
        while (expr := stream.parse_expr()) is not None:
            results.append(self.eval_expr(expr))
        logger.debug("evaluated %d expression(s)", len(results))
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results
