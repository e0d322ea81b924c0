"""Configuration loading from an optional YAML file, env vars, and CLI args."""

import logging
import os
from dataclasses import dataclass, fields

import yaml

from syslog_sender.errors import ValidationError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ENV_VARS = {
    "server": "SYSLOG_SERVER",
    "port": "SYSLOG_PORT",
    "facility": "SYSLOG_FACILITY",
    "severity": "SYSLOG_SEVERITY",
    "application_name": "SYSLOG_APP_NAME",
    "hostname": "SYSLOG_HOSTNAME",
    "rfc3164": "SYSLOG_RFC3164",
    "timeout": "SYSLOG_TIMEOUT",
    "static_address": "SYSLOG_STATIC_ADDRESS",
    "log_level": "LOG_LEVEL",
}


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    server: str | None = None
    port: int = 514
    facility: str = "user"
    severity: str = "informational"
    application_name: str | None = None
    hostname: str = "-"
    rfc3164: bool = False
    timeout: float = 5.0
    static_address: str | None = None
    log_level: str = "INFO"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path.

    Accepts either a flat mapping or one nested under a ``syslog:`` key.
    """
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as exc:
        raise ValidationError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValidationError(f"Config file {path} must contain a mapping")
    if isinstance(data.get("syslog"), dict):
        data = data["syslog"]
    logger.info("Loaded YAML config from %s", path)
    return data


def _convert(name: str, value):
    """Coerce a raw YAML/env/CLI value to the type of field *name*."""
    if value is None:
        return None
    try:
        if name == "port":
            return int(value)
        if name == "timeout":
            return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid value for {name}: {value!r}") from None
    if name == "rfc3164":
        return _parse_bool(value)
    if name == "log_level":
        level = str(value).upper()
        if level not in LOG_LEVELS:
            raise ValidationError(f"Invalid log level: {value!r}")
        return level
    return str(value)


def load_config(cli_args=None, yaml_data: dict | None = None) -> Config:
    """Build Config from defaults <- YAML <- env vars <- CLI args (highest priority).

    *cli_args* is an argparse Namespace; attributes that are ``None`` (or
    missing) are treated as not given.
    """
    known = {f.name for f in fields(Config)}
    kwargs: dict = {}

    for key, value in (yaml_data or {}).items():
        key = key.replace("-", "_")
        if key not in known:
            logger.warning("Ignoring unknown config key %r", key)
            continue
        if value is None:
            continue
        kwargs[key] = _convert(key, value)

    for name, env_var in _ENV_VARS.items():
        if env_var in os.environ:
            kwargs[name] = _convert(name, os.environ[env_var])

    if cli_args is not None:
        for name in known:
            value = getattr(cli_args, name, None)
            if value is not None:
                kwargs[name] = _convert(name, value)

    return Config(**kwargs)
