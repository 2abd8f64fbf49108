from __future__ import annotations

import socket

from evconf.core.wizard.device_check import check_tcp


def test_reachable_port() -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.bind(("127.0.0.1", 0))
        server.listen(1)
        port = server.getsockname()[1]
        result = check_tcp("127.0.0.1", port, timeout=2.0)
    assert result.ok
    assert result.address == f"127.0.0.1:{port}"
    assert result.error is None


def test_closed_port_reports_error() -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    result = check_tcp("127.0.0.1", port, timeout=1.0)
    assert not result.ok
    assert result.error
