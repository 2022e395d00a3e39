"""Network interface helpers."""

from __future__ import annotations

import ipaddress
import socket
from typing import List

import psutil


def _is_external(address: str) -> bool:
    try:
        return not ipaddress.ip_address(address).is_loopback
    except ValueError:
        return False


def get_ips() -> List[str]:
    """Return the external addresses of all interfaces, IPv4 first."""

    ip4s: List[str] = []
    ip6s: List[str] = []
    for addrs in psutil.net_if_addrs().values():
        for addr in addrs:
            if addr.family == socket.AF_INET:
                bucket = ip4s
            elif addr.family == socket.AF_INET6:
                bucket = ip6s
            else:
                continue
            # strip the IPv6 zone, e.g. fe80::1%eth0
            address = addr.address.split("%", 1)[0]
            if _is_external(address):
                bucket.append(address)
    return ip4s + ip6s
