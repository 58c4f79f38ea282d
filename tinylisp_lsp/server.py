from __future__ import annotations

"""
A minimal pygls-based Language Server for tinylisp.

Features:
- Text synchronization and document store
- Diagnostics: reader errors, conditionals whose condition is not a boolean
- Hover: the `if` form and literal atoms
- Hover on the opening paren of a top-level form: the value it evaluates to

Documents are re-analyzed on every change; see tinylisp_lsp.diagnostics.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Diagnostic,
    DiagnosticSeverity,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
)

from tinylisp import __version__
from tinylisp_lsp.diagnostics import Analysis, WARNING, analyze, describe_word, extract_word_at

logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    text: str
    analysis: Analysis


class TinyLispLanguageServer(LanguageServer):
    CMD_NAME = "tinylisp-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__)
        self.documents: Dict[str, DocumentState] = {}


ls = TinyLispLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(server: TinyLispLanguageServer, params: DidOpenTextDocumentParams):
    _update(server, params.text_document.uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(server: TinyLispLanguageServer, params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    # pygls has already applied the edits to its workspace copy
    document = server.workspace.get_text_document(uri)
    _update(server, uri, document.source)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(server: TinyLispLanguageServer, params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    server.documents.pop(uri, None)
    server.publish_diagnostics(uri, [])


def _update(server: TinyLispLanguageServer, uri: str, text: str) -> None:
    analysis = analyze(text)
    server.documents[uri] = DocumentState(text=text, analysis=analysis)
    logger.debug("%s: %d problem(s)", uri, len(analysis.problems))
    server.publish_diagnostics(uri, to_diagnostics(analysis))


# --- Diagnostics ---
def _mk_range(line: int, col: int) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + 1))


def to_diagnostics(analysis: Analysis) -> List[Diagnostic]:
    return [
        Diagnostic(
            range=_mk_range(p.line, p.col),
            message=p.message,
            severity=DiagnosticSeverity.Warning if p.severity == WARNING else DiagnosticSeverity.Error,
            source=TinyLispLanguageServer.CMD_NAME,
        )
        for p in analysis.problems
    ]


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(server: TinyLispLanguageServer, params: HoverParams) -> Optional[Hover]:
    state = server.documents.get(params.text_document.uri)
    if not state:
        return None

    pos = params.position
    # Hovering the opening paren of a top-level form shows its value
    for result in state.analysis.results:
        if result.line == pos.line and result.col == pos.character:
            return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=f"=> {result.text}"))

    contents = describe_word(extract_word_at(state.text, pos.line, pos.character))
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


def main() -> None:
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
