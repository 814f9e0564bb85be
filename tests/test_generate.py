# ===============================================
# tests/test_generate.py
# Request builder, payload wire format, clients
# ===============================================

import json
from unittest.mock import MagicMock

import pytest
import requests

from lmquery.errors import InvalidArguments, RequestFailed, ServerUnreachable
from lmquery.generate import (
    EchoDevClient,
    LMStudioClient,
    Message,
    build_messages,
    build_payload,
)
from lmquery.generate.clients import lmstudio_client


# -------- builder
def test_messages_system_first_when_context_present():
    msgs = build_messages("why?", "some context")
    assert msgs == [Message("system", "some context"), Message("user", "why?")]


def test_messages_user_only_without_context():
    assert build_messages("why?") == [Message("user", "why?")]
    assert build_messages("why?", "") == [Message("user", "why?")]


@pytest.mark.parametrize("query", ["", "   "])
def test_blank_query_rejected(query):
    with pytest.raises(InvalidArguments):
        build_messages(query)


def test_payload_wire_format():
    payload = build_payload("q", "ctx")
    assert json.loads(payload.to_json()) == {
        "model": "local-model",
        "messages": [
            {"role": "system", "content": "ctx"},
            {"role": "user", "content": "q"},
        ],
    }


def test_payload_keeps_non_ascii():
    assert "café" in build_payload("café").to_json()


# -------- LMStudioClient
def _fake_response(data=None, status=200, json_error=False):
    resp = MagicMock()
    resp.status_code = status
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(response=resp)
    if json_error:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = data
    return resp


def test_client_posts_payload(monkeypatch):
    post = MagicMock(return_value=_fake_response({"choices": []}))
    monkeypatch.setattr(lmstudio_client.requests, "post", post)

    client = LMStudioClient("http://localhost:1234/", timeout=12)
    data = client.chat(build_payload("hi"))

    assert data == {"choices": []}
    args, kwargs = post.call_args
    assert args[0] == "http://localhost:1234/v1/chat/completions"
    assert kwargs["json"] == {"model": "local-model", "messages": [{"role": "user", "content": "hi"}]}
    assert kwargs["timeout"] == 12


def test_client_http_error(monkeypatch):
    monkeypatch.setattr(lmstudio_client.requests, "post", MagicMock(return_value=_fake_response(status=500)))
    with pytest.raises(RequestFailed, match="HTTP 500"):
        LMStudioClient().chat(build_payload("hi"))


def test_client_connection_error(monkeypatch):
    post = MagicMock(side_effect=requests.ConnectionError("refused"))
    monkeypatch.setattr(lmstudio_client.requests, "post", post)
    with pytest.raises(RequestFailed):
        LMStudioClient().chat(build_payload("hi"))


def test_client_non_json_body(monkeypatch):
    monkeypatch.setattr(lmstudio_client.requests, "post", MagicMock(return_value=_fake_response(json_error=True)))
    with pytest.raises(RequestFailed, match="JSON"):
        LMStudioClient().chat(build_payload("hi"))


def test_client_non_object_body(monkeypatch):
    monkeypatch.setattr(lmstudio_client.requests, "post", MagicMock(return_value=_fake_response(["x"])))
    with pytest.raises(RequestFailed):
        LMStudioClient().chat(build_payload("hi"))


def test_client_host_and_port_from_base_url():
    client = LMStudioClient("http://10.0.0.5:8080")
    assert (client.host, client.port) == ("10.0.0.5", 8080)


def test_client_probe_ok(listening_port):
    LMStudioClient(f"http://127.0.0.1:{listening_port}").probe(timeout=2)


def test_client_probe_unreachable(closed_port):
    with pytest.raises(ServerUnreachable):
        LMStudioClient(f"http://127.0.0.1:{closed_port}").probe(timeout=2)


# -------- EchoDevClient
def test_echo_client_answers_with_last_user_message():
    data = EchoDevClient().chat(build_payload("ping", "ctx"))
    assert data["choices"][0]["message"]["content"] == "[ECHO RESPONSE]\nping"
    assert data["model"] == "echo-dev"
    usage = data["usage"]
    assert usage["total_tokens"] == usage["prompt_tokens"] + usage["completion_tokens"]
