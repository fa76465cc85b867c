from __future__ import annotations

import asyncio
import errno
import logging
import time
from typing import Callable, List, Optional, Set

from .models import PortOutcome, ProbeResult, ScanConfig
from .output import print_finished, print_result

logger = logging.getLogger(__name__)

# Out of file descriptors: the concurrency bound is too high for this host.
_EXHAUSTION_ERRNOS = (errno.EMFILE, errno.ENFILE)

ResultCallback = Callable[[ProbeResult], None]


async def _close(writer: asyncio.StreamWriter) -> None:
    writer.close()
    try:
        await writer.wait_closed()
    except OSError:
        pass


async def probe(config: ScanConfig, port: int) -> ProbeResult:
    start = time.perf_counter()
    try:
        _, writer = await asyncio.wait_for(
            asyncio.open_connection(config.target_address, port),
            timeout=config.timeout,
        )
    # TimeoutError is an OSError subclass on 3.11+, so it has to come first
    except asyncio.TimeoutError:
        outcome = PortOutcome.TIMED_OUT
    except ConnectionRefusedError:
        outcome = PortOutcome.CLOSED
    except OSError as e:
        if e.errno in _EXHAUSTION_ERRNOS:
            raise
        logger.debug("port %d: %s", port, e)
        outcome = PortOutcome.CONNECTION_ERROR
    else:
        outcome = PortOutcome.OPEN
        await _close(writer)

    elapsed = time.perf_counter() - start
    logger.debug("port %d -> %s (%.4fs)", port, outcome.value, elapsed)
    return ProbeResult(port=port, outcome=outcome, elapsed_s=round(elapsed, 4))


async def scan(
    config: ScanConfig,
    on_result: Optional[ResultCallback] = None,
) -> List[ProbeResult]:
    """
    Sliding-window scanner: at most config.concurrency probes are in flight,
    and a new one is started as soon as any outstanding probe finishes.
    Results are returned in completion order.
    """
    results: List[ProbeResult] = []
    jobs = iter(config.ports)
    pending: Set[asyncio.Future] = set()

    def submit_next() -> bool:
        try:
            port = next(jobs)
        except StopIteration:
            return False
        pending.add(asyncio.ensure_future(probe(config, port)))
        return True

    try:
        # Prime the window
        while len(pending) < config.concurrency and submit_next():
            pass

        while pending:
            done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
            for fut in done:
                r = fut.result()
                results.append(r)
                if on_result is not None:
                    on_result(r)

            # Refill the window
            while len(pending) < config.concurrency and submit_next():
                pass
    finally:
        # only non-empty when a probe raised or the scan was cancelled
        for fut in pending:
            fut.cancel()

    return results


def run_scan(config: ScanConfig) -> List[ProbeResult]:
    """Runs one scan to completion, printing each outcome and a final line."""
    results = asyncio.run(scan(config, on_result=lambda r: print_result(r, config.verbose)))
    print_finished()
    return results
