"""Runtime environment for tinylisp.

An Environment maps Symbols to expressions. It is a persistent value: nothing
mutates an existing environment, and ``bind`` returns a new one whose frame
chains to the receiver through ``outer``. Older environments stay valid and
unchanged, so callers can hold on to any of them.
"""

from __future__ import annotations

from collections.abc import Mapping
from io import StringIO
from types import MappingProxyType
from typing import Iterator, Optional

from tinylisp import LispValue
from tinylisp.errors import InvalidSymbol, UnboundSymbol
from tinylisp.types.symbol import Symbol


class Environment(Mapping):
    """Immutable chain of frames from Symbols to Lisp values."""

    __slots__ = ("vars", "outer", "_snapshot")

    def __init__(
        self,
        bindings: Optional[Mapping[Symbol, LispValue]] = None,
        outer: Optional[Environment] = None,
    ):
        frame: dict[Symbol, LispValue] = {}
        for k, v in (bindings or {}).items():
            if not isinstance(k, Symbol):
                raise InvalidSymbol(f"Cannot bind {k!r}: not a symbol")
            frame[k] = v
        object.__setattr__(self, "vars", MappingProxyType(frame))
        object.__setattr__(self, "outer", outer)
        # Flattened view, computed on first use
        object.__setattr__(self, "_snapshot", None)

    @classmethod
    def empty(cls) -> Environment:
        return cls()

    def bind(self, name: Symbol, value: LispValue) -> Environment:
        """Return a new environment where `name` is bound to `value`.

        The receiver is left untouched. Raises InvalidSymbol if `name` is not a
        Symbol.
        """
        if not isinstance(name, Symbol):
            raise InvalidSymbol(f"Cannot bind {name!r}: not a symbol")
        return Environment({name: value}, outer=self)

    def bind_many(self, mapping: Mapping[Symbol, LispValue]) -> Environment:
        """Return a new environment with every entry of `mapping` bound."""
        if not mapping:
            return self
        return Environment(mapping, outer=self)

    def find(self, name: Symbol) -> Optional[Environment]:
        """Nearest frame in the chain that binds `name`, or None."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Value bound to `name`; the newest binding wins.

        Raises UnboundSymbol if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def _flatten(self) -> dict[Symbol, LispValue]:
        if self._snapshot is None:
            frames = []
            env: Optional[Environment] = self
            while env is not None:
                frames.append(env.vars)
                env = env.outer
            merged: dict[Symbol, LispValue] = {}
            for frame in reversed(frames):
                merged.update(frame)
            # frozen slot, assigned once
            object.__setattr__(self, "_snapshot", merged)
        return self._snapshot

    # --- Mapping protocol ---

    def __getitem__(self, name: Symbol) -> LispValue:
        return self.lookup(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Symbol) and self.find(name) is not None

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._flatten())

    def __len__(self) -> int:
        return len(self._flatten())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self is other or self._flatten() == other._flatten()

    __hash__ = None  # type: ignore[assignment]

    def __setattr__(self, key, value):
        raise AttributeError("Environment is immutable; use bind() to extend it")

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the visible bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self._flatten().items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
