from __future__ import annotations
import logging
import os

# Language limits
MAX_VAR_NAME = 15
MAX_STRING_LEN = 50

# Defaults
_DEFAULT_MAX_COMMAND_LENGTH = 100
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_SERVER_HOST = "127.0.0.1"
_DEFAULT_SERVER_PORT = 8765

EXIT_KEYWORD = "exit"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_max_command_length() -> int:
    # 0 (or a negative value) disables the limit
    return int_from_env('MINIPY_MAX_COMMAND_LENGTH', _DEFAULT_MAX_COMMAND_LENGTH)


def get_log_level() -> int:
    raw = os.environ.get('MINIPY_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.WARNING


def get_server_address() -> tuple[str, int]:
    host = os.environ.get('MINIPY_SERVER_HOST') or _DEFAULT_SERVER_HOST
    return host, int_from_env('MINIPY_SERVER_PORT', _DEFAULT_SERVER_PORT)
