"""UDP SYSLOG sender — RFC 3164 / RFC 5424 message composer."""

from syslog_sender.client import SyslogClient, build_record, send_syslog_message
from syslog_sender.errors import SyslogError, TransportError, ValidationError
from syslog_sender.models import NILVALUE, Facility, FormatVariant, Severity, SyslogRecord

__all__ = [
    "NILVALUE",
    "Facility",
    "FormatVariant",
    "Severity",
    "SyslogClient",
    "SyslogError",
    "SyslogRecord",
    "TransportError",
    "ValidationError",
    "build_record",
    "send_syslog_message",
]
