from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Defaults
DEFAULT_PROMPT = ">>> "
DEFAULT_ERROR_PREFIX = "**ERR** "
DEFAULT_NOTATION = "dot"
DEFAULT_LOG_LEVEL = "WARNING"

NOTATIONS = ("dot", "list")


@dataclass(frozen=True)
class Settings:
    prompt: str = DEFAULT_PROMPT
    error_prefix: str = DEFAULT_ERROR_PREFIX
    notation: str = DEFAULT_NOTATION
    recursion_limit: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL


def value_from_env(var: str, default: str, environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    raw = env.get(var)
    if raw is None:
        return default
    return raw


def get_notation(environ: Optional[Mapping[str, str]] = None) -> str:
    notation = value_from_env('DOTLISP_NOTATION', DEFAULT_NOTATION, environ).strip().lower()
    if notation not in NOTATIONS:
        raise ValueError(f"DOTLISP_NOTATION must be one of {NOTATIONS}, got {notation!r}")
    return notation


def get_recursion_limit(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    raw = value_from_env('DOTLISP_RECURSION_LIMIT', '', environ).strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"DOTLISP_RECURSION_LIMIT must be an integer, got {raw!r}") from None
    if limit <= 0:
        raise ValueError(f"DOTLISP_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    return Settings(
        prompt=value_from_env('DOTLISP_PROMPT', DEFAULT_PROMPT, environ),
        error_prefix=value_from_env('DOTLISP_ERROR_PREFIX', DEFAULT_ERROR_PREFIX, environ),
        notation=get_notation(environ),
        recursion_limit=get_recursion_limit(environ),
        log_level=value_from_env('DOTLISP_LOG_LEVEL', DEFAULT_LOG_LEVEL, environ).strip().upper(),
    )
