from __future__ import annotations
import logging
import os
from dataclasses import dataclass


# Defaults
_DEFAULT_PROMPT = "tl> "
_DEFAULT_CONTINUATION_PROMPT = "... "
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_REPL_HOST = "127.0.0.1"
_DEFAULT_REPL_PORT = 8765


@dataclass(frozen=True)
class Settings:
    prompt: str = _DEFAULT_PROMPT
    continuation_prompt: str = _DEFAULT_CONTINUATION_PROMPT
    log_level: str = _DEFAULT_LOG_LEVEL
    repl_host: str = _DEFAULT_REPL_HOST
    repl_port: int = _DEFAULT_REPL_PORT


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return default if raw is None else raw


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def log_level_from_env(var: str, default: str) -> str:
    level = str_from_env(var, default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{var} must be a logging level name, got {level!r}")
    return level


def get_settings() -> Settings:
    """Settings from TINYLISP_* environment variables, read at call time."""
    return Settings(
        prompt=str_from_env("TINYLISP_PROMPT", _DEFAULT_PROMPT),
        continuation_prompt=str_from_env("TINYLISP_CONTINUATION_PROMPT", _DEFAULT_CONTINUATION_PROMPT),
        log_level=log_level_from_env("TINYLISP_LOG_LEVEL", _DEFAULT_LOG_LEVEL),
        repl_host=str_from_env("TINYLISP_REPL_HOST", _DEFAULT_REPL_HOST),
        repl_port=int_from_env("TINYLISP_REPL_PORT", _DEFAULT_REPL_PORT),
    )
