"""Shared pytest fixtures for the syslog sender test suite."""

import socket
from datetime import datetime, timezone

import pytest

from syslog_sender.hostname import HostnameProvider


class FakeHostnameProvider(HostnameProvider):
    """Deterministic provider that records which lookups were made."""

    def __init__(self, machine=None, domain=None, address=None):
        self._machine = machine
        self._domain = domain
        self._address = address
        self.calls: list[str] = []

    def machine_name(self):
        self.calls.append("machine_name")
        return self._machine

    def dns_domain(self):
        self.calls.append("dns_domain")
        return self._domain

    def static_address(self):
        self.calls.append("static_address")
        return self._address


@pytest.fixture
def udp_receiver():
    """Bind a UDP socket on an ephemeral loopback port and yield (socket, port)."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    _, port = sock.getsockname()
    yield sock, port
    sock.close()


@pytest.fixture
def fixed_timestamp() -> datetime:
    return datetime(2024, 1, 15, 10, 30, 0, 123456, tzinfo=timezone.utc)


@pytest.fixture
def fake_provider() -> FakeHostnameProvider:
    return FakeHostnameProvider(machine="host1", domain="example.com")


@pytest.fixture
def no_network(monkeypatch):
    """Fail the test if anything tries to resolve an address or open a socket."""
    opened = []

    def _forbidden(*args, **kwargs):
        opened.append(args)
        raise AssertionError("network access attempted")

    monkeypatch.setattr("syslog_sender.transport.socket.socket", _forbidden)
    monkeypatch.setattr("syslog_sender.transport.socket.getaddrinfo", _forbidden)
    return opened


@pytest.fixture
def make_provider():
    """Factory for FakeHostnameProvider instances."""
    return FakeHostnameProvider
