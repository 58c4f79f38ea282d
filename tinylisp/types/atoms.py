"""Atomic expression variants: integers and booleans.

Both are frozen dataclasses, so equality is structural and restricted to the
same variant: ``Integer(1) != Boolean(True)`` even though ``1 == True`` in
Python.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Integer:
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer payload must be an int, not {type(self.value).__name__}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise TypeError(f"Boolean payload must be a bool, not {type(self.value).__name__}")

    def __str__(self) -> str:
        return "#t" if self.value else "#f"


TRUE = Boolean(True)
FALSE = Boolean(False)
