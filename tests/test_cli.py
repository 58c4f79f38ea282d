import pytest
from typer.testing import CliRunner

from tinylisp.cli import app

runner = CliRunner()


def test_eval_prints_each_value():
    result = runner.invoke(app, ["eval", "(if (if #t #f #t) 3 4) (+ 1 2)"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["4", "(+ 1 2)"]


def test_eval_error_exits_nonzero():
    result = runner.invoke(app, ["eval", "(if 3 4 5)"])
    assert result.exit_code == 1
    assert "type mismatch" in result.output


def test_run_file(tmp_path):
    source = tmp_path / "prog.tl"
    source.write_text("; conditionals\n(if #t 1 2)\n(if #f 1 2)\n", encoding="utf-8")
    result = runner.invoke(app, ["run", str(source)])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["1", "2"]


def test_run_missing_file(tmp_path):
    result = runner.invoke(app, ["run", str(tmp_path / "missing.tl")])
    assert result.exit_code != 0


def test_repl_command_reads_stdin(monkeypatch):
    monkeypatch.setenv("TINYLISP_PROMPT", "")
    result = runner.invoke(app, ["repl"], input="(if #f 1 2)\n")
    assert result.exit_code == 0
    assert "2" in result.output.splitlines()


def test_no_command_starts_repl(monkeypatch):
    monkeypatch.setenv("TINYLISP_PROMPT", "")
    result = runner.invoke(app, [], input="#t\n")
    assert result.exit_code == 0
    assert "#t" in result.output.splitlines()


@pytest.mark.parametrize(
    "var, value",
    [
        ("TINYLISP_REPL_PORT", "eighty"),
        ("TINYLISP_LOG_LEVEL", "LOUD"),
    ]
)
def test_invalid_setting_exits_with_message(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    result = runner.invoke(app, ["eval", "1"])
    assert result.exit_code == 1
    assert var in result.output


def test_verbose_flag_is_accepted():
    result = runner.invoke(app, ["--verbose", "eval", "#t"])
    assert result.exit_code == 0
    assert "#t" in result.output.splitlines()
