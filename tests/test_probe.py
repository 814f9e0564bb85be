# ===============================================
# tests/test_probe.py
# ===============================================

import logging

import pytest

from lmquery.errors import ServerUnreachable
from lmquery.probe import probe_server


def test_probe_reachable(listening_port):
    probe_server("127.0.0.1", listening_port, timeout=2)


def test_probe_refused(closed_port):
    with pytest.raises(ServerUnreachable, match=str(closed_port)):
        probe_server("127.0.0.1", closed_port, timeout=2)


def test_probe_logs_when_given_logger(listening_port, caplog):
    caplog.set_level(logging.DEBUG, logger="test.probe")
    probe_server("127.0.0.1", listening_port, timeout=2, logger=logging.getLogger("test.probe"))
    assert any("reachable" in r.getMessage() for r in caplog.records)
