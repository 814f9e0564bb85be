# src/lmquery/generate/types.py
# Request side: plain dataclasses. Response side: pydantic models where every
# field is optional, so a sparse server reply still parses, and each top-level
# field is validated on its own so one odd field does not hide the others.

from __future__ import annotations
import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

DEFAULT_MODEL = "local-model"


@dataclass
class Message:
    """Single chat turn: system or user."""
    role: str
    content: str


@dataclass
class RequestPayload:
    """Body of POST /v1/chat/completions."""
    messages: List[Message]
    model: str = DEFAULT_MODEL

    def to_dict(self) -> Dict[str, Any]:
        return {"model": self.model, "messages": [asdict(m) for m in self.messages]}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="allow")


class ChoiceMessage(_Lenient):
    role: Optional[Any] = None
    content: Optional[str] = None


class Choice(_Lenient):
    index: Optional[Any] = None
    message: Optional[ChoiceMessage] = None
    finish_reason: Optional[Any] = None


class Usage(_Lenient):
    prompt_tokens: Optional[Union[int, float]] = None
    completion_tokens: Optional[Union[int, float]] = None
    total_tokens: Optional[Union[int, float]] = None


class ResponsePayload(_Lenient):
    choices: List[Choice] = []
    usage: Optional[Usage] = None
    model: Optional[str] = None

    @property
    def content(self) -> Optional[str]:
        if not self.choices or self.choices[0].message is None:
            return None
        return self.choices[0].message.content

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "ResponsePayload":
        """Validate field by field, dropping any field that does not fit."""
        fields: Dict[str, Any] = {}
        for name in ("choices", "usage", "model"):
            if name not in raw:
                continue
            try:
                fields[name] = getattr(cls.model_validate({name: raw[name]}), name)
            except ValidationError:
                continue
        return cls(**fields)
