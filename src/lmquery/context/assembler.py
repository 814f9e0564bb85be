# src/lmquery/context/assembler.py
# =============================================================
# Turns a ContextSource into the single string sent as the system message.
#   - FilePath:     checked (exists / not a dir / allowed extension), read, sanitized
#   - InlineValues: strings joined by newlines; anything else rendered as
#                   "key : value" field lists separated by "---"
#   - NoContext:    None
# =============================================================

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, List, Optional, Sequence, TextIO

from ..errors import (
    ContextFileNotFound,
    ContextFileUnreadable,
    ContextIsDirectory,
    InvalidArguments,
    UnsupportedExtension,
)
from .sanitize import sanitize_text
from .types import ContextSource, FilePath, InlineValues, NoContext

ALLOWED_EXTENSIONS = frozenset({
    ".txt", ".md", ".csv", ".json", ".xml", ".log", ".ps1", ".py",
    ".js", ".ts", ".html", ".css", ".ini", ".conf", ".yaml", ".yml",
})

ITEM_SEPARATOR = "\n---\n"

_log = logging.getLogger(__name__)


# ---------- source resolution (CLI boundary)
def _parse_context_json(raw: str) -> List[Any]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidArguments(f"--context-json is not valid JSON: {e}") from e
    return list(data) if isinstance(data, list) else [data]


def resolve_context_source(
    context: Optional[Sequence[str]] = None,
    context_json: Optional[str] = None,
    file: Optional[str] = None,
    stdin: Optional[TextIO] = None,
) -> ContextSource:
    """Pick the one active context source. Raises before touching any file or stdin."""
    inline_given = bool(context) or context_json is not None
    if inline_given and file:
        raise InvalidArguments("Use either inline context or --file, not both.")
    if context and context_json is not None:
        raise InvalidArguments("Use either --context or --context-json, not both.")

    if file:
        return FilePath(Path(file))
    if context_json is not None:
        raw = (stdin or sys.stdin).read() if context_json == "-" else context_json
        return InlineValues(_parse_context_json(raw))
    if context:
        return InlineValues(list(context))
    return NoContext()


# ---------- rendering of structured values
def _fields_of(value: Any) -> Optional[List[tuple]]:
    if isinstance(value, Mapping):
        return [(str(k), v) for k, v in value.items()]
    if hasattr(value, "__dict__") and not isinstance(value, type):
        return [(k, v) for k, v in vars(value).items() if not k.startswith("_")]
    return None


def _render_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple, Mapping)):
        try:
            return json.dumps(value, ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            # non-str keys or self-references
            return str(value)
    return str(value)


def render_item(value: Any) -> str:
    """Render one value as a field list, e.g. ``name : Ada`` per line."""
    if isinstance(value, str):
        return value
    fields = _fields_of(value)
    if fields is None:
        return "" if value is None else str(value)
    if not fields:
        return ""
    width = max(len(k) for k, _ in fields)
    return "\n".join(f"{k:<{width}} : {_render_value(v)}" for k, v in fields)


def render_values(values: Sequence[Any]) -> str:
    if all(isinstance(v, str) for v in values):
        return "\n".join(values)
    rendered = ITEM_SEPARATOR.join(render_item(v) for v in values)
    if not rendered.strip():
        # nothing readable came out, hand over the raw form rather than nothing
        return str(list(values))
    return rendered


# ---------- file branch
def read_context_file(path: Path, escape: bool = True) -> str:
    path = Path(path)
    if not path.exists():
        raise ContextFileNotFound(f"File not found: {path}")
    if path.is_dir():
        raise ContextIsDirectory(f"Path is a directory, not a file: {path}")
    suffix = path.suffix.lower()
    if suffix not in ALLOWED_EXTENSIONS:
        allowed = ", ".join(sorted(ALLOWED_EXTENSIONS))
        raise UnsupportedExtension(f"Unsupported file type '{suffix or path.name}'. Allowed: {allowed}")
    try:
        raw = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ContextFileUnreadable(f"Cannot read file {path}: {e}") from e
    return sanitize_text(raw, escape=escape)


def assemble_context(
    source: ContextSource,
    escape: bool = True,
    logger: Optional[logging.Logger] = None,
) -> Optional[str]:
    logger = logger or _log
    if isinstance(source, NoContext):
        logger.debug("No context supplied.")
        return None
    if isinstance(source, FilePath):
        logger.debug("Reading context from file: %s", source.path)
        text = read_context_file(source.path, escape=escape)
        logger.debug("Read %d characters from %s", len(text), source.path)
        return text
    if isinstance(source, InlineValues):
        text = render_values(source.values)
        logger.debug("Assembled %d characters from %d inline value(s)", len(text), len(source.values))
        return text
    raise TypeError(f"Unknown context source: {source!r}")
