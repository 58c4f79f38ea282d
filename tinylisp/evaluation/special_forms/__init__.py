"""Registry of special forms for the tinylisp evaluator.

Maps Symbols to SpecialForm entries that implement non-standard evaluation
rules. The evaluator consults this table before its literal fallback; a form
is only dispatched when it is a proper list with exactly ``arity`` operands,
anything else headed by the same symbol stays inert data.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from tinylisp.types.symbol import Symbol
from tinylisp.evaluation.special_forms.if_form import if_form


@dataclass(frozen=True)
class SpecialForm:
    name: Symbol
    arity: int
    handler: Callable


IF = Symbol("if")

SPECIAL_FORMS: Mapping[Symbol, SpecialForm] = MappingProxyType({
    IF: SpecialForm(IF, 3, if_form),
})


def extend_forms(
    *extra: SpecialForm, base: Mapping[Symbol, SpecialForm] = SPECIAL_FORMS
) -> Mapping[Symbol, SpecialForm]:
    """Return a new registry with `extra` added to (or overriding) `base`."""
    table = dict(base)
    for form in extra:
        table[form.name] = form
    return MappingProxyType(table)
