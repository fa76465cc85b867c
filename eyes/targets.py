from __future__ import annotations

import ipaddress
import socket


def resolve_target(target: str) -> str:
    """
    Supports:
      - IPv4 / IPv6 literal: "172.20.0.10", "::1"
      - Hostname: "webapp" (resolves to one IP)
    """
    target = (target or "").strip()
    if not target:
        raise ValueError("Empty target")

    try:
        ip = ipaddress.ip_address(target)
        return str(ip)
    except ValueError:
        pass

    try:
        return socket.gethostbyname(target)
    except (socket.gaierror, UnicodeError) as e:
        raise ValueError(f"Could not resolve target '{target}': {e}") from e
