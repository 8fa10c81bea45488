"""Network reachability probe used by the CLI. Not part of the crypto core."""

import socket
from typing import NamedTuple, Optional


class ProbeResult(NamedTuple):
    host: str
    port: int
    reachable: bool
    error: Optional[str] = None


def probe(host: str, port: int, timeout: float = 3.0) -> ProbeResult:
    """Attempt a TCP connection. Network failures are reported, not raised."""
    try:
        with socket.create_connection((host, port), timeout=timeout):
            return ProbeResult(host, port, True)
    except OSError as e:
        return ProbeResult(host, port, False, str(e))


def parse_target(target: str):
    """Split 'host:port' into (host, port). Raises ValueError if malformed."""
    host, sep, port = target.rpartition(':')
    if not sep or not host or not port.isdigit():
        raise ValueError(f"expected HOST:PORT, got '{target}'")
    port_number = int(port)
    if not 0 < port_number < 65536:
        raise ValueError(f"port out of range: {port_number}")
    return host.strip('[]'), port_number
