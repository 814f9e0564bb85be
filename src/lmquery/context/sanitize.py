# src/lmquery/context/sanitize.py
# Cleanup for file-sourced context before it is embedded in a request.

from __future__ import annotations
import re

# -------- regexes
_ANSI = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")
_CTRL = re.compile(r"[\u0000-\u0008\u000b\u000c\u000e-\u001f]")  # keep \n and \t (\r handled below)

# order matters: the escape char itself first
_INTERPOLATION_ESCAPES = (
    ("`", "``"),
    ("$", "`$"),
    ('"', '`"'),
)


def escape_interpolation(s: str) -> str:
    for raw, escaped in _INTERPOLATION_ESCAPES:
        s = s.replace(raw, escaped)
    return s


def sanitize_text(s: str, escape: bool = True) -> str:
    """Strip NULs, ANSI sequences and control chars, drop CRs, then escape
    backtick, ``$`` and double quotes unless ``escape`` is off."""
    s = s.replace("\x00", "")
    s = _ANSI.sub("", s)
    s = s.replace("\x1b", "")
    s = _CTRL.sub("", s)
    s = s.replace("\r", "")
    if escape:
        s = escape_interpolation(s)
    return s
