"""Syslog client — validates inputs, fills defaults, formats and sends one message."""

import logging
import os
import sys
from datetime import datetime

from syslog_sender import transport
from syslog_sender.errors import ValidationError
from syslog_sender.formatter import format_message
from syslog_sender.hostname import HostnameProvider, SystemHostnameProvider, resolve_hostname
from syslog_sender.models import (
    NILVALUE,
    Facility,
    FormatVariant,
    Severity,
    SyslogRecord,
    parse_facility,
    parse_severity,
)
from syslog_sender.priority import compute_priority

logger = logging.getLogger(__name__)


def default_application_name() -> str:
    """Name of the invoking program, without whitespace."""
    name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""
    name = "_".join(name.split())
    return name or "python"


def _require_text(value, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} must be a non-empty string")
    return value


def _optional_text(value, name: str, default: str) -> str:
    if value is None:
        return default
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    return _require_text(value, name)


def _validate_port(port) -> int:
    if isinstance(port, bool) or not isinstance(port, int):
        raise ValidationError(f"udp_port must be an integer, got {port!r}")
    return port


def build_record(message: str, severity, facility, hostname: str = NILVALUE,
                 application_name: str | None = None, process_id: str | None = None,
                 message_id: str = NILVALUE, structured_data: str = NILVALUE,
                 timestamp: datetime | None = None, *,
                 hostname_provider: HostnameProvider | None = None,
                 clock=None, pid_provider=None) -> SyslogRecord:
    """Validate inputs and assemble a SyslogRecord.

    Every argument is checked before the hostname lookup runs.

    Raises:
        ValidationError: On an empty required value, an empty optional value,
            or a severity/facility outside its enumeration.
    """
    message = _require_text(message, "message")
    severity = parse_severity(severity)
    facility = parse_facility(facility)
    hostname = _optional_text(hostname, "hostname", NILVALUE)
    message_id = _optional_text(message_id, "message_id", NILVALUE)
    structured_data = _optional_text(structured_data, "structured_data", NILVALUE)
    if application_name is not None:
        application_name = _require_text(application_name, "application_name")
    if process_id is not None:
        process_id = _optional_text(process_id, "process_id", NILVALUE)
    if timestamp is not None and not isinstance(timestamp, datetime):
        raise ValidationError(f"timestamp must be a datetime, got {type(timestamp).__name__}")

    if application_name is None:
        application_name = default_application_name()
    if process_id is None:
        process_id = str((pid_provider or os.getpid)())
    if timestamp is None:
        timestamp = (clock or datetime.now)()

    return SyslogRecord(
        priority=compute_priority(facility, severity),
        timestamp=timestamp,
        hostname=resolve_hostname(hostname, hostname_provider),
        application_name=application_name,
        process_id=process_id,
        message_id=message_id,
        structured_data=structured_data,
        message_text=message,
    )


def send_syslog_message(server: str, message: str, severity, facility,
                        hostname: str = NILVALUE, application_name: str | None = None,
                        process_id: str | None = None, message_id: str = NILVALUE,
                        structured_data: str = NILVALUE, timestamp: datetime | None = None,
                        udp_port: int = transport.DEFAULT_PORT, rfc3164: bool = False, *,
                        hostname_provider: HostnameProvider | None = None,
                        clock=None, pid_provider=None, timeout: float | None = None) -> None:
    """Format one SYSLOG message and send it as a single UDP datagram.

    Raises:
        ValidationError: Before any lookup or socket activity, on bad input.
        TransportError: If the datagram could not be handed to the OS.
    """
    server = _require_text(server, "server")
    udp_port = _validate_port(udp_port)

    record = build_record(
        message, severity, facility,
        hostname=hostname,
        application_name=application_name,
        process_id=process_id,
        message_id=message_id,
        structured_data=structured_data,
        timestamp=timestamp,
        hostname_provider=hostname_provider,
        clock=clock,
        pid_provider=pid_provider,
    )
    variant = FormatVariant.RFC3164 if rfc3164 else FormatVariant.RFC5424
    payload = format_message(record, variant)

    logger.debug("Priority: %d", record.priority)
    logger.debug("Message: %s", payload)

    transport.send(server, payload, port=udp_port, timeout=timeout)


class SyslogClient:
    """Sends messages to one collector with shared per-destination defaults."""

    def __init__(self, server: str, port: int = transport.DEFAULT_PORT,
                 application_name: str | None = None, hostname: str = NILVALUE,
                 rfc3164: bool = False, facility=Facility.USER,
                 severity=Severity.INFORMATIONAL,
                 hostname_provider: HostnameProvider | None = None,
                 clock=None, pid_provider=None, timeout: float | None = None):
        self._server = _require_text(server, "server")
        self._port = _validate_port(port)
        self._application_name = application_name
        self._hostname = hostname
        self._rfc3164 = rfc3164
        self._facility = parse_facility(facility)
        self._severity = parse_severity(severity)
        self._hostname_provider = hostname_provider
        self._clock = clock
        self._pid_provider = pid_provider
        self._timeout = timeout

    @classmethod
    def from_config(cls, config, **kwargs) -> "SyslogClient":
        """Build a client from a ``config.Config``; kwargs override providers."""
        kwargs.setdefault(
            "hostname_provider", SystemHostnameProvider(static_address=config.static_address))
        return cls(
            config.server,
            port=config.port,
            application_name=config.application_name,
            hostname=config.hostname,
            rfc3164=config.rfc3164,
            facility=config.facility,
            severity=config.severity,
            timeout=config.timeout,
            **kwargs,
        )

    @property
    def server(self) -> str:
        return self._server

    @property
    def port(self) -> int:
        return self._port

    def send(self, message: str, severity=None, facility=None, **overrides) -> None:
        """Send *message*; severity/facility fall back to the client defaults."""
        params = {
            "hostname": self._hostname,
            "application_name": self._application_name,
            "rfc3164": self._rfc3164,
            "hostname_provider": self._hostname_provider,
            "clock": self._clock,
            "pid_provider": self._pid_provider,
            "timeout": self._timeout,
            "udp_port": self._port,
        }
        params.update(overrides)
        send_syslog_message(
            self._server,
            message,
            self._severity if severity is None else severity,
            self._facility if facility is None else facility,
            **params,
        )
