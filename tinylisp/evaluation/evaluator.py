"""Core evaluator for tinylisp.

``evaluate(expr, env)`` returns ``(value, env')``. Atoms evaluate to
themselves, registered special forms are dispatched by shape, and any other
compound data is returned untouched. The environment is threaded through and
returned, never mutated.
"""

from __future__ import annotations

from typing import Mapping, Optional

from tinylisp import SExpression, LispValue
from tinylisp.errors import EvaluationDepthExceeded
from tinylisp.evaluation.special_forms import SPECIAL_FORMS, SpecialForm
from tinylisp.types.atoms import Boolean, Integer
from tinylisp.types.environment import Environment
from tinylisp.types.nil import NilType
from tinylisp.types.pair import Pair, list_items
from tinylisp.types.symbol import Symbol


def evaluate(
    expr: SExpression,
    env: Environment,
    forms: Optional[Mapping[Symbol, SpecialForm]] = None,
) -> tuple[LispValue, Environment]:
    """
    Evaluate `expr` against `env`, returning the value and the environment to
    carry into the next step. `forms` replaces the special-form registry.
    """
    if forms is None:
        forms = SPECIAL_FORMS
    try:
        return evaluate0(expr, env, forms)
    except RecursionError as exc:
        raise EvaluationDepthExceeded(
            "expression nesting too deep to evaluate"
        ) from exc


def evaluate0(
    expr: SExpression,
    env: Environment,
    forms: Mapping[Symbol, SpecialForm],
) -> tuple[LispValue, Environment]:
    """
    Single recursive step. Special forms call back into this function, so the
    depth guard in `evaluate` wraps the whole descent.
    """
    match expr:
        # --- Atoms return as-is (symbols are not looked up) ---
        case Integer() | Boolean() | Symbol() | NilType():
            return expr, env

        # --- Special forms, recognized by shape ---
        case Pair(head=Symbol() as head) if head in forms:
            form = forms[head]
            operands = list_items(expr.tail)
            if operands is not None and len(operands) == form.arity:
                return form.handler(expr, operands, env, forms, evaluate0)

        case Pair():
            pass

        case _:
            raise TypeError(f"Not a tinylisp expression: {expr!r}")

    # --- Unrecognized compound data is a literal ---
    return expr, env
