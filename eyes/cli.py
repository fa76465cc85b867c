from __future__ import annotations

import argparse
import sys

from .logger import create_logger, level_for
from .models import ScanConfig
from .ports import DEFAULT_PORT_SPEC, parse_ports
from .scanner import run_scan
from .targets import resolve_target

DEFAULT_CONCURRENCY = 1000
DEFAULT_TIMEOUT = 3


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="eyes", description="Concurrent TCP connect port scanner")
    p.add_argument("target", help="The IP (or hostname) to scan")
    p.add_argument("-v", "--verbose", action="store_true", help="Display detailed information, including closed ports")
    p.add_argument("-p", "--ports", default=DEFAULT_PORT_SPEC, help="Port spec: 1-1024 or 22,80,443 or mixed (default: 1-1024)")
    p.add_argument("-c", "--concurrency", type=int, default=DEFAULT_CONCURRENCY, help="Number of simultaneous connection attempts (default: 1000)")
    p.add_argument("-t", "--timeout", type=int, default=DEFAULT_TIMEOUT, help="Connect timeout seconds (default: 3)")
    p.add_argument("--debug", action="store_true", help="Log every probe outcome to stderr")
    return p


def build_config(args: argparse.Namespace) -> ScanConfig:
    if args.concurrency < 1:
        raise SystemExit("--concurrency must be >= 1")
    if args.timeout < 1:
        raise SystemExit("--timeout must be >= 1")

    try:
        target_address = resolve_target(args.target)
    except ValueError as e:
        raise SystemExit(f"[eyes] {e}") from e

    return ScanConfig(
        target_address=target_address,
        ports=tuple(parse_ports(args.ports)),
        concurrency=args.concurrency,
        timeout=args.timeout,
        verbose=args.verbose,
    )


def main(argv=None) -> int:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 2

    args = parser.parse_args(argv)
    logger = create_logger(level_for(args.verbose, args.debug))

    config = build_config(args)

    logger.info("Scanning %d ports on %s", len(config.ports), config.target_address)
    logger.info("Concurrency: %d", config.concurrency)
    logger.info("Timeout: %s", config.timeout)

    try:
        run_scan(config)
    except KeyboardInterrupt:
        print("[eyes] Scan interrupted", file=sys.stderr)
        return 130

    return 0
