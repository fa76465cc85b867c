from __future__ import annotations

from .models import ProbeResult

FINISHED_LINE = "[eyes] Finished scan"


def format_result(r: ProbeResult) -> str:
    return f"{r.port}: {r.status}"


def print_result(r: ProbeResult, verbose: bool) -> None:
    if not r.is_open and not verbose:
        return
    print(format_result(r), flush=True)


def print_finished() -> None:
    print(FINISHED_LINE, flush=True)
