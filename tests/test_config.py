import pytest

from tinylisp.config import Settings, get_settings


def test_defaults(monkeypatch):
    for var in (
        "TINYLISP_PROMPT",
        "TINYLISP_CONTINUATION_PROMPT",
        "TINYLISP_LOG_LEVEL",
        "TINYLISP_REPL_HOST",
        "TINYLISP_REPL_PORT",
    ):
        monkeypatch.delenv(var, raising=False)
    assert get_settings() == Settings()
    assert get_settings().prompt == "tl> "
    assert get_settings().repl_port == 8765


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TINYLISP_PROMPT", "> ")
    monkeypatch.setenv("TINYLISP_LOG_LEVEL", "debug")
    monkeypatch.setenv("TINYLISP_REPL_PORT", "9000")
    settings = get_settings()
    assert settings.prompt == "> "
    assert settings.log_level == "DEBUG"
    assert settings.repl_port == 9000


def test_empty_prompt_is_allowed(monkeypatch):
    monkeypatch.setenv("TINYLISP_PROMPT", "")
    assert get_settings().prompt == ""


@pytest.mark.parametrize(
    "var, value",
    [
        ("TINYLISP_REPL_PORT", "eighty"),
        ("TINYLISP_LOG_LEVEL", "LOUD"),
    ]
)
def test_invalid_values(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValueError, match=var):
        get_settings()
