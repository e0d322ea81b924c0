"""CLI entry point for the UDP syslog sender."""

import argparse
import logging
import sys

from syslog_sender.client import SyslogClient, build_record
from syslog_sender.config import load_config, load_yaml_config
from syslog_sender.errors import TransportError, ValidationError
from syslog_sender.formatter import format_message
from syslog_sender.hostname import SystemHostnameProvider
from syslog_sender.models import FormatVariant

logger = logging.getLogger(__name__)


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send a SYSLOG message over UDP")
    parser.add_argument("message", help="Message text")
    parser.add_argument("--server", default=None, help="Collector host (env: SYSLOG_SERVER)")
    parser.add_argument("--port", type=int, default=None, help="Collector UDP port (default: 514)")
    parser.add_argument("--severity", default=None,
                        help="Severity name or code 0-7 (default: informational)")
    parser.add_argument("--facility", default=None,
                        help="Facility name or code 0-23 (default: user)")
    parser.add_argument("--hostname", default=None,
                        help="Reporting hostname; '-' resolves it from the OS")
    parser.add_argument("--app-name", dest="application_name", default=None,
                        help="Application name (default: program name)")
    parser.add_argument("--process-id", default=None, help="Process ID (default: current pid)")
    parser.add_argument("--message-id", default="-", help="RFC 5424 MSGID")
    parser.add_argument("--structured-data", default="-", help="RFC 5424 STRUCTURED-DATA")
    parser.add_argument("--rfc3164", action="store_true", default=None,
                        help="Use the legacy RFC 3164 format")
    parser.add_argument("--timeout", type=float, default=None, help="Send timeout in seconds")
    parser.add_argument("--static-address", default=None,
                        help="Address to report when no FQDN is available")
    parser.add_argument("--config", default=None, help="Path to YAML config file")
    parser.add_argument("--dry-run", action="store_true",
                        help="Print the formatted message instead of sending it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_cli_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args, load_yaml_config(args.config))
    except ValidationError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stderr,
    )

    provider = SystemHostnameProvider(static_address=config.static_address)
    overrides = {
        "process_id": args.process_id,
        "message_id": args.message_id,
        "structured_data": args.structured_data,
    }

    try:
        if args.dry_run:
            record = build_record(
                args.message, config.severity, config.facility,
                hostname=config.hostname,
                application_name=config.application_name,
                hostname_provider=provider,
                **overrides,
            )
            variant = FormatVariant.RFC3164 if config.rfc3164 else FormatVariant.RFC5424
            print(format_message(record, variant))
            return 0

        if not config.server:
            parser.error("a collector is required: pass --server or set SYSLOG_SERVER")

        client = SyslogClient.from_config(config, hostname_provider=provider)
        client.send(args.message, **overrides)
    except ValidationError as exc:
        logger.error("Invalid input: %s", exc)
        return 2
    except TransportError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Sent message to %s:%d", client.server, client.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
