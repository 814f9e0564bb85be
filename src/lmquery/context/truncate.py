# src/lmquery/context/truncate.py
from __future__ import annotations

import logging
from typing import Optional

from ..errors import InvalidArguments

CHARS_PER_TOKEN = 4
DEFAULT_MAX_TOKENS = 100000


def max_chars_for(max_tokens: int) -> int:
    if not isinstance(max_tokens, int) or isinstance(max_tokens, bool) or max_tokens <= 0:
        raise InvalidArguments(f"max_tokens must be a positive integer, got {max_tokens!r}")
    return max_tokens * CHARS_PER_TOKEN


def truncate_to_budget(
    text: str,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    logger: Optional[logging.Logger] = None,
) -> str:
    """
    Cut ``text`` to the character budget implied by ``max_tokens``.
    This is a heuristic, not a tokenizer: 1 token ~= 4 chars, no word boundaries.
    """
    max_chars = max_chars_for(max_tokens)
    if len(text) <= max_chars:
        return text
    if logger:
        logger.warning(
            "Warning: context is %d characters, truncating to %d (~%d tokens).",
            len(text), max_chars, max_tokens,
        )
    return text[:max_chars]
