# src/lmquery/generate/builder.py
from __future__ import annotations
from typing import List, Optional

from ..errors import InvalidArguments
from .types import DEFAULT_MODEL, Message, RequestPayload


def build_messages(query: str, context: Optional[str] = None) -> List[Message]:
    """System message with the context (if any) first, then the user query."""
    if not query or not query.strip():
        raise InvalidArguments("Query must not be empty.")
    messages: List[Message] = []
    if context:
        messages.append(Message(role="system", content=context))
    messages.append(Message(role="user", content=query))
    return messages


def build_payload(query: str, context: Optional[str] = None, model: str = DEFAULT_MODEL) -> RequestPayload:
    return RequestPayload(messages=build_messages(query, context), model=model)
