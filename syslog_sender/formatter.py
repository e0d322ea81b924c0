"""Serializes a SyslogRecord into RFC 3164 or RFC 5424 text."""

from datetime import datetime

from syslog_sender.errors import ValidationError
from syslog_sender.models import FormatVariant, SyslogRecord

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _localize(ts: datetime) -> datetime:
    """Attach the local UTC offset to naive timestamps; leave aware ones alone."""
    if ts.tzinfo is None:
        return ts.astimezone()
    return ts


def format_rfc3164_timestamp(ts: datetime) -> str:
    """``Mmm dd HH:MM:SS`` with a space-padded day."""
    return f"{_MONTHS[ts.month - 1]} {ts.day:2d} {ts:%H:%M:%S}"


def format_rfc5424_timestamp(ts: datetime) -> str:
    """``YYYY-MM-DDTHH:MM:SS.ffffff+HH:MM``."""
    return _localize(ts).isoformat(timespec="microseconds")


def format_message(record: SyslogRecord, variant: FormatVariant = FormatVariant.RFC5424) -> str:
    """Build the wire text for *record*.

    Raises:
        ValidationError: If *variant* is not a known FormatVariant.
    """
    try:
        variant = FormatVariant(variant)
    except ValueError:
        raise ValidationError(f"Unknown format variant: {variant!r}") from None

    if variant == FormatVariant.RFC3164:
        fields = [
            format_rfc3164_timestamp(record.timestamp),
            record.hostname,
            record.application_name,
            record.message_text,
        ]
        return f"<{record.priority}>" + " ".join(fields)

    fields = [
        format_rfc5424_timestamp(record.timestamp),
        record.hostname,
        record.application_name,
        record.process_id,
        record.message_id,
        record.structured_data,
        record.message_text,
    ]
    return f"<{record.priority}>1 " + " ".join(fields)
