"""Network addresses of crawler components."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass

from .errors import IllegalParameterError

_NETWORKS = frozenset({"http", "https"})


@dataclass(frozen=True)
class ModuleAddr:
    """A component's protocol and ``ip:port`` address."""

    network: str
    address: str

    def __str__(self) -> str:
        return self.address


def legal_ip(ip: object) -> bool:
    """Whether ``ip`` is a textual IPv4 or IPv6 address."""
    if not isinstance(ip, str) or "%" in ip:
        return False
    try:
        ipaddress.ip_address(ip)
    except ValueError:
        return False
    return True


def new_addr(network: str, ip: str, port: int) -> ModuleAddr:
    """Build a component address, raising IllegalParameterError on bad input."""
    if network not in _NETWORKS:
        raise IllegalParameterError(f"illegal network for module address: {network}")
    if not legal_ip(ip):
        raise IllegalParameterError(f"illegal IP for module address: {ip}")
    if port < 0:
        raise IllegalParameterError(f"illegal port for module address: {port}")
    return ModuleAddr(network=network, address=f"{ip}:{port}")