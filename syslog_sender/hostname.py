"""Reporting hostname resolution with an OS-lookup fallback chain."""

import logging
import os
import socket

from syslog_sender.models import NILVALUE

logger = logging.getLogger(__name__)

RESOLV_CONF = "/etc/resolv.conf"
INTERFACES_FILE = "/etc/network/interfaces"


class HostnameProvider:
    """Source of host identity facts. Each lookup returns a string or None."""

    def machine_name(self) -> str | None:
        return None

    def dns_domain(self) -> str | None:
        return None

    def static_address(self) -> str | None:
        return None


class SystemHostnameProvider(HostnameProvider):
    """Reads host identity from the local OS network configuration."""

    def __init__(self, static_address: str | None = None,
                 resolv_conf: str = RESOLV_CONF, interfaces_file: str = INTERFACES_FILE):
        self._static_address = static_address
        self._resolv_conf = resolv_conf
        self._interfaces_file = interfaces_file

    def machine_name(self) -> str | None:
        name = socket.gethostname()
        return name.split(".", 1)[0] or None

    def dns_domain(self) -> str | None:
        domain = os.environ.get("USERDNSDOMAIN", "").strip()
        if domain:
            return domain

        name = self.machine_name()
        fqdn = socket.getfqdn()
        if name and fqdn.lower().startswith(name.lower() + "."):
            suffix = fqdn[len(name) + 1:]
            if suffix and suffix.lower() != "localdomain":
                return suffix

        return self._resolv_conf_domain()

    def static_address(self) -> str | None:
        if self._static_address:
            return self._static_address
        return self._ifupdown_static_address()

    def _resolv_conf_domain(self) -> str | None:
        """Return the ``domain`` entry of resolv.conf, else the first ``search`` entry."""
        search = None
        try:
            with open(self._resolv_conf, "r", encoding="utf-8") as f:
                for line in f:
                    parts = line.split()
                    if len(parts) < 2 or parts[0].startswith(("#", ";")):
                        continue
                    if parts[0] == "domain":
                        return parts[1]
                    if parts[0] == "search" and search is None:
                        search = parts[1]
        except FileNotFoundError:
            return None
        return search

    def _ifupdown_static_address(self) -> str | None:
        """Return the address of the first ``inet static`` stanza, if any."""
        in_static = False
        try:
            with open(self._interfaces_file, "r", encoding="utf-8") as f:
                for line in f:
                    parts = line.split()
                    if not parts or parts[0].startswith("#"):
                        continue
                    if parts[0] == "iface":
                        in_static = len(parts) >= 4 and parts[2] == "inet" and parts[3] == "static"
                    elif in_static and parts[0] == "address" and len(parts) >= 2:
                        return parts[1].split("/", 1)[0]
        except FileNotFoundError:
            return None
        return None


def _lookup(fn) -> str | None:
    try:
        value = fn()
    except (OSError, UnicodeError) as exc:
        logger.debug("Hostname lookup %s failed: %s", fn.__name__, exc)
        return None
    if value:
        value = value.strip()
    return value or None


def resolve_hostname(explicit: str = NILVALUE, provider: HostnameProvider | None = None) -> str:
    """Return *explicit* unless it is NILVALUE, else walk the fallback chain.

    Order: ``machine.domain`` FQDN, static interface address, machine name,
    then NILVALUE. Never raises.
    """
    if explicit != NILVALUE:
        return explicit

    if provider is None:
        provider = SystemHostnameProvider()

    machine = _lookup(provider.machine_name)
    domain = _lookup(provider.dns_domain)
    if machine and domain:
        return f"{machine}.{domain}"

    address = _lookup(provider.static_address)
    if address:
        return address

    if machine:
        return machine

    logger.debug("No hostname information available, using NILVALUE")
    return NILVALUE
