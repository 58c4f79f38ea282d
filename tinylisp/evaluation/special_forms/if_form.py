from __future__ import annotations

from typing import Mapping

from tinylisp import EvaluatorFn
from tinylisp import SExpression
from tinylisp.errors import TypeMismatch
from tinylisp.types.atoms import Boolean
from tinylisp.types.environment import Environment


def if_form(
    form: SExpression,
    operands: list[SExpression],
    env: Environment,
    forms: Mapping,
    evaluate_fn: EvaluatorFn,
) -> tuple[SExpression, Environment]:
    condition, consequent, alternative = operands

    # Only the value is used; the condition's environment is dropped
    value, _ = evaluate_fn(condition, env, forms)
    if not isinstance(value, Boolean):
        raise TypeMismatch(form, value)

    branch = consequent if value.value else alternative
    # Against the original env. Whatever the branch binds is returned to the
    # caller (no block scope).
    return evaluate_fn(branch, env, forms)
