import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from tinylisp.config import Settings, get_settings
from tinylisp.errors import TinyLispError
from tinylisp.interpreter import Interpreter
from tinylisp.printer import to_string
from tinylisp.reader.parser import lex, TokenStream
from tinylisp.repl import run_repl

app = typer.Typer(no_args_is_help=False)

logger = logging.getLogger(__name__)
# Console for stderr (logs/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console(highlight=False)


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    *,
    verbose: Annotated[bool, typer.Option(help="Enable debug logging")] = False,
) -> None:
    """tinylisp interpreter. Starts the REPL when no command is given."""
    try:
        settings = get_settings()
    except ValueError as ex:
        err_console.print(f"error: {ex}", style="red", markup=False)
        raise typer.Exit(code=1) from None
    log_level = logging.DEBUG if verbose else settings.log_level

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
        force=True,
    )
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        run_repl(settings=settings, console=out_console)


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else get_settings()


def _eval_source(source: str) -> None:
    """Evaluate every form in `source`, printing each value; exit 1 on error."""
    interp = Interpreter()
    try:
        for expr in TokenStream(lex(source)).parse_all():
            out_console.print(to_string(interp.eval_expr(expr)), markup=False)
    except TinyLispError as ex:
        err_console.print(f"error: {ex}", style="red", markup=False)
        raise typer.Exit(code=1) from None


@app.command()
def repl(
    ctx: typer.Context,
    prompt: Annotated[Optional[str], typer.Option(help="Prompt string")] = None,
) -> None:
    """Start the interactive read-evaluate-print loop."""
    settings = _settings(ctx)
    if prompt is not None:
        settings = replace(settings, prompt=prompt)
    run_repl(settings=settings, console=out_console)


@app.command()
def run(
    path: Annotated[Path, typer.Argument(help="Source file to evaluate", exists=True, dir_okay=False)],
) -> None:
    """Evaluate every form in a file and print the values."""
    logger.debug("Running %s", path)
    _eval_source(path.read_text(encoding="utf-8"))


@app.command("eval")
def eval_(
    code: Annotated[str, typer.Argument(help="Source text to evaluate")],
) -> None:
    """Evaluate source text given on the command line."""
    _eval_source(code)


@app.command()
def serve(
    ctx: typer.Context,
    host: Annotated[Optional[str], typer.Option(help="Interface to bind")] = None,
    port: Annotated[Optional[int], typer.Option(help="TCP port")] = None,
) -> None:
    """Serve JSON-lines REPL sessions over TCP."""
    from tinylisp_lsp.repl_server import ReplServer

    settings = _settings(ctx)
    ReplServer(host or settings.repl_host, settings.repl_port if port is None else port).serve_forever()


@app.command()
def lsp() -> None:
    """Run the language server over stdio."""
    from tinylisp_lsp.server import main

    main()


def main() -> None:
    app()
