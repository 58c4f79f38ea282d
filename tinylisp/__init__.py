# Core type aliases for tinylisp's data model.
# The concrete variants (Integer, Boolean, Symbol, Nil, Pair) live in
# tinylisp.types; these aliases are kept import-cycle free so every module can
# use them in annotations.
#
# Naming guidance:
# - SExpression: forms as produced by the reader (code-as-data).
# - LispValue:  values produced by the evaluator.
# Both are the same closed union; evaluation never leaves it.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias, interchangeable with LispValue
SExpression = LispValue

# Evaluator function type, handed to special forms so they can recurse
EvaluatorFn = Callable[..., tuple]

__version__ = "0.1.0"
