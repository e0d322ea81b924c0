"""UDP transport — encode, cap at one datagram, send, close."""

import logging
import socket

from syslog_sender.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 514
MAX_DATAGRAM_BYTES = 1024
PAYLOAD_ENCODING = "ascii"


def encode_payload(payload: str) -> bytes:
    """One byte per character; characters outside ASCII become ``?``."""
    return payload.encode(PAYLOAD_ENCODING, errors="replace")


def truncate_payload(data: bytes, limit: int = MAX_DATAGRAM_BYTES) -> bytes:
    """Return the first *limit* bytes of *data*.

    Slices raw bytes, so a multi-byte sequence or field boundary may be cut.
    """
    if len(data) <= limit:
        return data
    logger.debug("Truncating payload from %d to %d bytes", len(data), limit)
    return data[:limit]


def send(server_host: str, payload: str, port: int = DEFAULT_PORT,
         timeout: float | None = None) -> None:
    """Send *payload* to ``server_host:port`` as a single UDP datagram.

    Raises:
        TransportError: If resolution, socket creation, or the send fails.
    """
    data = truncate_payload(encode_payload(payload))

    try:
        family, socktype, proto, _, address = socket.getaddrinfo(
            server_host, port, type=socket.SOCK_DGRAM)[0]
        with socket.socket(family, socktype, proto) as sock:
            sock.settimeout(timeout)
            sock.sendto(data, address)
    except (OSError, OverflowError) as exc:
        raise TransportError(f"Failed to send syslog datagram to {server_host}:{port}: {exc}") from exc

    logger.debug("Sent %d bytes to %s:%d", len(data), server_host, port)
