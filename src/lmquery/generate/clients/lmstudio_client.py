# Client for an OpenAI-compatible local server (LM Studio and friends).
# Exposes probe() and chat(payload).

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests

from ...errors import RequestFailed
from ...probe import probe_server
from ..types import RequestPayload

COMPLETIONS_PATH = "/v1/chat/completions"


class LMStudioClient:
    def __init__(
        self,
        base_url: str = "http://localhost:1234",
        timeout: float = 300.0,
        logger: Optional[logging.Logger] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        parsed = urlparse(self.base_url)
        self.host = parsed.hostname or "localhost"
        self.port = parsed.port or (443 if parsed.scheme == "https" else 80)

    @property
    def url(self) -> str:
        return f"{self.base_url}{COMPLETIONS_PATH}"

    def probe(self, timeout: float = 3.0) -> None:
        probe_server(self.host, self.port, timeout=timeout, logger=self.logger)

    def chat(self, payload: RequestPayload) -> Dict[str, Any]:
        self.logger.debug("POST %s (%d message(s), model=%s)", self.url, len(payload.messages), payload.model)
        try:
            resp = requests.post(self.url, json=payload.to_dict(), timeout=self.timeout)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            raise RequestFailed(f"Request to {self.url} failed: HTTP {status}") from e
        except requests.RequestException as e:
            raise RequestFailed(f"Request to {self.url} failed: {e}") from e
        try:
            data = resp.json()
        except ValueError as e:
            raise RequestFailed(f"Server at {self.url} did not return JSON") from e
        if not isinstance(data, dict):
            raise RequestFailed(f"Server at {self.url} returned {type(data).__name__}, expected a JSON object")
        return data
