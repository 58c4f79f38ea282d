from __future__ import annotations


class NilType:
    """The empty list. There is exactly one instance, exported as ``Nil``."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Nil"
    def __bool__(self): return False
    def __iter__(self): return iter(())

    # Equal only to itself, never to None, 0 or an empty Python list
    def __eq__(self, other):
        return other is self

    def __hash__(self):
        return hash("Nil")

    # Identity survives copy/deepcopy/pickle
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (NilType, ())


Nil = NilType()
