# Offline client for --dry-run and tests: answers with the user's own query.

from typing import Any, Dict
from ..types import RequestPayload

class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"

    def probe(self, timeout: float = 0.0) -> None:
        return None

    def chat(self, payload: RequestPayload) -> Dict[str, Any]:
        user_inputs = [m.content for m in payload.messages if m.role == "user"]
        text = f"[ECHO RESPONSE]\n{user_inputs[-1] if user_inputs else '(no user input)'}"
        prompt_chars = sum(len(m.content) for m in payload.messages)
        prompt_tokens = -(-prompt_chars // 4)
        completion_tokens = -(-len(text) // 4)
        return {
            "object": "chat.completion",
            "model": self.model,
            "choices": [{"index": 0, "message": {"role": "assistant", "content": text}, "finish_reason": "stop"}],
            "usage": {
                "prompt_tokens": prompt_tokens,
                "completion_tokens": completion_tokens,
                "total_tokens": prompt_tokens + completion_tokens,
            },
        }
