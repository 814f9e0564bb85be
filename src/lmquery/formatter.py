# src/lmquery/formatter.py
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from .generate.types import ResponsePayload

NO_CONTENT_NOTICE = "No content found in response."

_log = logging.getLogger(__name__)


def format_response(
    raw: Dict[str, Any],
    developer: bool = False,
    logger: Optional[logging.Logger] = None,
) -> str:
    """Whole payload as JSON in developer mode, else just the answer text."""
    if developer:
        return json.dumps(raw, indent=2, ensure_ascii=False)
    content = ResponsePayload.from_raw(raw).content
    if content is None:
        (logger or _log).warning("Warning: response had no message content.")
        return NO_CONTENT_NOTICE
    return content


def format_usage(raw: Dict[str, Any]) -> Optional[str]:
    parsed = ResponsePayload.from_raw(raw)
    if parsed.usage is None:
        return None
    parts: List[str] = []
    if parsed.model:
        parts.append(f"model={parsed.model}")
    for name in ("prompt_tokens", "completion_tokens", "total_tokens"):
        value = getattr(parsed.usage, name)
        if value is not None:
            parts.append(f"{name}={value}")
    if not parts:
        return None
    return "Usage: " + " | ".join(parts)
