"""Value types for SYSLOG messages: facility, severity, format variant, record."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum

from syslog_sender.errors import ValidationError

NILVALUE = "-"


class Facility(IntEnum):
    KERNEL = 0
    USER = 1
    MAIL = 2
    DAEMON = 3
    AUTH = 4
    SYSLOG = 5
    LPR = 6
    NEWS = 7
    UUCP = 8
    CLOCK = 9
    AUTHPRIV = 10
    FTP = 11
    NTP = 12
    LOGAUDIT = 13
    LOGALERT = 14
    CRON = 15
    LOCAL0 = 16
    LOCAL1 = 17
    LOCAL2 = 18
    LOCAL3 = 19
    LOCAL4 = 20
    LOCAL5 = 21
    LOCAL6 = 22
    LOCAL7 = 23


class Severity(IntEnum):
    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATIONAL = 6
    DEBUG = 7


class FormatVariant(str, Enum):
    RFC3164 = "rfc3164"
    RFC5424 = "rfc5424"


# Short names used by syslog(3) and logger(1).
_FACILITY_ALIASES = {
    "kern": Facility.KERNEL,
    "security": Facility.AUTH,
    "authorization": Facility.AUTH,
}

_SEVERITY_ALIASES = {
    "emerg": Severity.EMERGENCY,
    "panic": Severity.EMERGENCY,
    "crit": Severity.CRITICAL,
    "err": Severity.ERROR,
    "warn": Severity.WARNING,
    "info": Severity.INFORMATIONAL,
}


def _coerce(value, enum_cls, aliases: dict, label: str):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {label}: {value!r}")
    if isinstance(value, int):
        try:
            return enum_cls(value)
        except ValueError:
            raise ValidationError(f"Invalid {label} code: {value}") from None
    if isinstance(value, str):
        key = value.strip().lower()
        if key.isascii() and key.isdigit():
            return _coerce(int(key), enum_cls, aliases, label)
        if key in aliases:
            return aliases[key]
        try:
            return enum_cls[key.upper()]
        except KeyError:
            raise ValidationError(f"Unknown {label}: {value!r}") from None
    raise ValidationError(f"Invalid {label}: {value!r}")


def parse_facility(value) -> Facility:
    """Accept a Facility, an int code, or a case-insensitive name."""
    return _coerce(value, Facility, _FACILITY_ALIASES, "facility")


def parse_severity(value) -> Severity:
    """Accept a Severity, an int code, or a case-insensitive name."""
    return _coerce(value, Severity, _SEVERITY_ALIASES, "severity")


@dataclass(frozen=True)
class SyslogRecord:
    """Everything needed to serialize one SYSLOG message."""

    priority: int
    timestamp: datetime
    hostname: str
    application_name: str
    process_id: str
    message_text: str
    message_id: str = NILVALUE
    structured_data: str = NILVALUE
