"""Expression variants and the environment.

Re-exports the closed union shared by reader, evaluator and printer:
Integer, Boolean, Symbol, Nil and Pair, plus Environment.
"""

from tinylisp.types.atoms import Integer, Boolean, TRUE, FALSE
from tinylisp.types.symbol import Symbol
from tinylisp.types.nil import Nil, NilType
from tinylisp.types.pair import Pair, make_list, list_items, is_proper_list
from tinylisp.types.environment import Environment

__all__ = [
    "Integer",
    "Boolean",
    "TRUE",
    "FALSE",
    "Symbol",
    "Nil",
    "NilType",
    "Pair",
    "make_list",
    "list_items",
    "is_proper_list",
    "Environment",
]
