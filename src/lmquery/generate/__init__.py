# Generate package

# Request building, response types and the model clients.

from .builder import build_messages, build_payload
from .types import Message, RequestPayload, ResponsePayload, Usage
from .clients import EchoDevClient, LMStudioClient

__all__ = [
    "build_messages", "build_payload",
    "Message", "RequestPayload", "ResponsePayload", "Usage",
    "EchoDevClient", "LMStudioClient",
]
