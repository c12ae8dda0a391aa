"""Console diagnostics for the histogram CLI.

Everything here writes to stderr so that stdout carries only the histogram.
"""
from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

import colorama
from colorama import Fore, Style

__all__ = [
    "init",
    "kv",
    "success",
    "warning",
    "error",
    "elapsed",
]

_plain_mode = True
_use_color = False
_stream: Optional[TextIO] = None
_color_prefix = {
    "success": "",
    "warning": "",
    "error": "",
}

_symbol_success = "[OK]"
_symbol_warning = "[!]"
_symbol_error = "[X]"


def init(plain: bool = False, stream: Optional[TextIO] = None) -> None:
    """Initialise console helpers with optional colour output."""

    global _plain_mode, _use_color, _stream, _color_prefix
    global _symbol_success, _symbol_warning, _symbol_error

    _stream = stream
    target = _out()

    env_plain = bool(os.environ.get("NO_COLOR"))
    isatty = getattr(target, "isatty", None)
    try:
        is_tty = bool(isatty()) if isatty is not None else False
    except ValueError:  # closed stream
        is_tty = False

    _plain_mode = plain or env_plain or not is_tty
    _use_color = not _plain_mode
    if _use_color:
        colorama.just_fix_windows_console()

    if _plain_mode:
        _symbol_success = "[OK]"
        _symbol_warning = "[!]"
        _symbol_error = "[X]"
    else:
        _symbol_success = "✓"
        _symbol_warning = "!"
        _symbol_error = "✗"

    if _use_color:
        _color_prefix = {
            "success": Fore.GREEN + Style.BRIGHT,
            "warning": Fore.YELLOW + Style.BRIGHT,
            "error": Fore.RED + Style.BRIGHT,
        }
    else:
        _color_prefix = {"success": "", "warning": "", "error": ""}


def _out() -> TextIO:
    # Resolved lazily so that pytest's capsys replacement of sys.stderr is honoured.
    return _stream if _stream is not None else sys.stderr


def _emit(text: str) -> None:
    print(text, file=_out())


def _apply(style: str, message: str) -> str:
    if not _use_color:
        return message
    return f"{style}{message}{Style.RESET_ALL}"


def kv(key: str, value: str) -> None:
    """Print a key-value line."""

    _emit(f"{key}: {value}")


def success(msg: str) -> None:
    prefix = _color_prefix["success"]
    _emit(_apply(prefix, f"{_symbol_success} {msg}"))


def warning(msg: str) -> None:
    prefix = _color_prefix["warning"]
    _emit(_apply(prefix, f"{_symbol_warning} {msg}"))


def error(msg: str) -> None:
    """Highlight an error message."""

    prefix = _color_prefix["error"]
    _emit(_apply(prefix, f"{_symbol_error} {msg}"))


def elapsed(prefix: str, seconds: float) -> None:
    """Print a formatted elapsed time entry."""

    _emit(f"{prefix} {seconds:.2f}s")
