"""Render expressions back to source text.

- integers in decimal, booleans as #t / #f
- symbols by name, Nil as ()
- proper lists as (a b c), improper tails as (a b . c)

Rendering uses an explicit work stack, so arbitrarily nested input prints
without touching Python's recursion limit.
"""

from __future__ import annotations

from tinylisp import SExpression
from tinylisp.types.atoms import Boolean, Integer
from tinylisp.types.nil import NilType
from tinylisp.types.pair import Pair
from tinylisp.types.symbol import Symbol


def _atom_to_string(expr: SExpression) -> str:
    match expr:
        case Integer(value=value):
            return str(value)
        case Boolean(value=value):
            return "#t" if value else "#f"
        case Symbol():
            return expr.name
        case NilType():
            return "()"
    raise TypeError(f"Not a tinylisp expression: {expr!r}")


def to_string(expr: SExpression) -> str:
    out: list[str] = []
    # Each entry is (is_text, payload): literal text, or an expression to render
    stack: list[tuple[bool, object]] = [(False, expr)]
    while stack:
        is_text, item = stack.pop()
        if is_text:
            out.append(item)
            continue
        if not isinstance(item, Pair):
            out.append(_atom_to_string(item))
            continue

        elements = []
        node: SExpression = item
        while isinstance(node, Pair):
            elements.append(node.head)
            node = node.tail

        # Pushed in reverse so they pop in reading order
        stack.append((True, ")"))
        if not isinstance(node, NilType):
            stack.append((False, node))
            stack.append((True, " . "))
        for i in range(len(elements) - 1, -1, -1):
            stack.append((False, elements[i]))
            if i:
                stack.append((True, " "))
        stack.append((True, "("))
    return "".join(out)
