"""TCP reachability check for freshly configured devices."""
from __future__ import annotations

import logging
import socket
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckResult:
    address: str
    ok: bool
    error: Optional[str] = None


def check_tcp(host: str, port: int, timeout: float = 5.0) -> CheckResult:
    """Try to open a TCP connection to ``host:port`` within ``timeout`` seconds."""
    address = f"{host}:{port}"
    try:
        with socket.create_connection((host, port), timeout=timeout):
            pass
    except OSError as err:
        logger.info("Device check failed for %s: %s", address, err)
        return CheckResult(address=address, ok=False, error=str(err) or err.__class__.__name__)
    logger.info("Device check succeeded for %s", address)
    return CheckResult(address=address, ok=True)


__all__ = ["CheckResult", "check_tcp"]
