"""Cons cells and proper-list helpers.

A proper list is a chain of Pairs whose last tail is Nil. Equality, hashing
and the list helpers walk the tail spine iteratively, so long lists never
recurse; only nesting in head position costs Python stack.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from tinylisp import SExpression
from tinylisp.types.nil import Nil


@dataclass(frozen=True, eq=False, slots=True)
class Pair:
    head: SExpression
    tail: SExpression

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        a: SExpression = self
        b: SExpression = other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if a.head != b.head:
                return False
            a, b = a.tail, b.tail
        if isinstance(a, Pair) or isinstance(b, Pair):
            return False
        return a == b

    def __hash__(self) -> int:
        h = hash("Pair")
        node: SExpression = self
        while isinstance(node, Pair):
            h = hash((h, node.head))
            node = node.tail
        return hash((h, node))

    def __iter__(self) -> Iterator[SExpression]:
        """Yield the heads along the spine (the tail of a dotted list is skipped)."""
        node: SExpression = self
        while isinstance(node, Pair):
            yield node.head
            node = node.tail

    def __repr__(self) -> str:
        from tinylisp.printer import to_string
        return f"<Pair {to_string(self)}>"


def make_list(*items: SExpression, tail: SExpression = Nil) -> SExpression:
    """Build a list from ``items``; a non-Nil ``tail`` makes it dotted."""
    result = tail
    for item in reversed(items):
        result = Pair(item, result)
    return result


def list_items(expr: SExpression) -> Optional[list[SExpression]]:
    """Elements of a proper list, or None if ``expr`` is not one."""
    items: list[SExpression] = []
    while isinstance(expr, Pair):
        items.append(expr.head)
        expr = expr.tail
    if expr is not Nil:
        return None
    return items


def is_proper_list(expr: SExpression) -> bool:
    while isinstance(expr, Pair):
        expr = expr.tail
    return expr is Nil
