"""Exception types raised by the syslog sender."""


class SyslogError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(SyslogError, ValueError):
    """An input parameter is missing, empty, or outside its allowed set."""


class TransportError(SyslogError, OSError):
    """The UDP socket could not be created, resolved, or written to."""
