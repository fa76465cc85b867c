from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .models import MAX_PORT, MIN_PORT

logger = logging.getLogger(__name__)

DEFAULT_PORT_SPEC = "1-1024"
DEFAULT_PORTS = range(1, 1025)


def _parse_port(token: str) -> Optional[int]:
    token = token.strip()
    # int() would accept "+80" and " 80 "; only plain digits are ports
    if not (token.isascii() and token.isdigit()):
        return None
    p = int(token)
    if p < MIN_PORT or p > MAX_PORT:
        return None
    return p


def _parse_range(token: str) -> Optional[Tuple[int, int]]:
    bounds = token.split("-")
    if len(bounds) != 2:
        return None
    start = _parse_port(bounds[0])
    end = _parse_port(bounds[1])
    if start is None or end is None:
        return None
    # reversed bounds ("90-80") are normalized to ascending
    if start > end:
        start, end = end, start
    return start, end


def _expand_token(token: str) -> List[int]:
    token = token.strip()
    if not token:
        return []

    if "-" in token:
        bounds = _parse_range(token)
        if bounds is None:
            logger.warning("Skipping invalid port range: %r", token)
            return []
        return list(range(bounds[0], bounds[1] + 1))

    p = _parse_port(token)
    if p is None:
        logger.warning("Skipping invalid port: %r", token)
        return []
    return [p]


def parse_ports(spec: str) -> List[int]:
    """
    Parses a port specification string into a list of ports.
    Supports:
    - Single ports: "80"
    - Ranges: "1-1024" (inclusive, either bound order)
    - Comma-separated: "22,80,443"
    - Mixed: "1-1024,8080,9000-9005"

    Never raises. Bad tokens are skipped; if nothing usable is left the
    default range 1-1024 is returned. Order follows the spec and
    duplicates from overlapping tokens are kept.
    """
    spec = (spec or "").strip()

    ports: List[int] = []
    if "," in spec:
        for part in spec.split(","):
            ports.extend(_expand_token(part))
    else:
        ports.extend(_expand_token(spec))

    if not ports:
        logger.info("No usable ports in %r, falling back to %s", spec, DEFAULT_PORT_SPEC)
        return list(DEFAULT_PORTS)

    return ports
