"""tinylisp Language Server and REPL integration package.

This package provides:
- A pygls-based Language Server for tinylisp.
- A pure diagnostics module that reads and evaluates a document's forms.
- A simple TCP REPL server to evaluate code via the Interpreter.
"""

__all__ = [
    "server",
    "diagnostics",
    "repl_server",
]
