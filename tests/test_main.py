"""Tests for the command-line entry point."""

import pytest

import main as cli

ENV_VARS = [
    "SYSLOG_SERVER", "SYSLOG_PORT", "SYSLOG_FACILITY", "SYSLOG_SEVERITY",
    "SYSLOG_APP_NAME", "SYSLOG_HOSTNAME", "SYSLOG_RFC3164", "SYSLOG_TIMEOUT",
    "SYSLOG_STATIC_ADDRESS", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDryRun:
    def test_prints_rfc5424(self, capsys):
        rc = cli.main([
            "disk full", "--dry-run", "--severity", "err", "--facility", "mail",
            "--hostname", "host1", "--app-name", "testapp", "--process-id", "100",
        ])
        out = capsys.readouterr().out.strip()
        assert rc == 0
        assert out.startswith("<19>1 ")
        assert out.endswith(" host1 testapp 100 - - disk full")

    def test_prints_rfc3164(self, capsys):
        rc = cli.main(["hi", "--dry-run", "--rfc3164", "--hostname", "h", "--app-name", "a"])
        out = capsys.readouterr().out.strip()
        assert rc == 0
        assert out.startswith("<14>")
        assert out.endswith(" h a hi")

    def test_invalid_severity(self, capsys):
        rc = cli.main(["hi", "--dry-run", "--severity", "9", "--hostname", "h"])
        assert rc == 2

    def test_non_ascii_digit_severity(self):
        rc = cli.main(["hi", "--dry-run", "--severity", "²", "--hostname", "h"])
        assert rc == 2


class TestSend:
    def test_sends_datagram(self, udp_receiver):
        receiver, port = udp_receiver
        rc = cli.main([
            "hello", "--server", "127.0.0.1", "--port", str(port),
            "--hostname", "h", "--app-name", "a", "--process-id", "1",
            "--message-id", "ID1", "--structured-data", "[x@1 a=\"b\"]",
        ])
        data, _ = receiver.recvfrom(65536)
        assert rc == 0
        assert data.startswith(b"<14>1 ")
        assert data.endswith(b' h a 1 ID1 [x@1 a="b"] hello')

    def test_server_from_env(self, udp_receiver, monkeypatch):
        receiver, port = udp_receiver
        monkeypatch.setenv("SYSLOG_SERVER", "127.0.0.1")
        monkeypatch.setenv("SYSLOG_PORT", str(port))
        rc = cli.main(["from env", "--hostname", "h", "--rfc3164", "--app-name", "a"])
        data, _ = receiver.recvfrom(65536)
        assert rc == 0
        assert data.endswith(b" h a from env")

    def test_missing_server_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["hello", "--hostname", "h"])
        assert exc_info.value.code == 2

    def test_transport_failure(self, monkeypatch):
        def _refuse(*args, **kwargs):
            raise OSError("network unreachable")

        monkeypatch.setattr("syslog_sender.transport.socket.getaddrinfo", _refuse)
        rc = cli.main(["hello", "--server", "10.255.255.1", "--hostname", "h"])
        assert rc == 1
