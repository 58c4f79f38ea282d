from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("name",)

    def __init__(self, name: str):
        if not isinstance(name, str):
            raise TypeError(f"Symbol name must be a str, not {type(name).__name__}")
        # Intern so equality/hash reduce to a pointer check in the common case
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("Symbol", self.name))

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
