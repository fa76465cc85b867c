from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

MIN_PORT = 0
MAX_PORT = 65535


class PortOutcome(Enum):
    OPEN = "open"
    CLOSED = "closed"
    TIMED_OUT = "timed_out"
    CONNECTION_ERROR = "connection_error"

    @property
    def is_open(self) -> bool:
        return self is PortOutcome.OPEN


@dataclass(frozen=True)
class ScanConfig:
    target_address: str
    ports: Tuple[int, ...]
    concurrency: int = 1000
    timeout: float = 3
    verbose: bool = False

    def __post_init__(self) -> None:
        # frozen, so bypass __setattr__ to normalize lists into a tuple
        object.__setattr__(self, "ports", tuple(self.ports))

        if self.concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {self.concurrency}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {self.timeout}")
        for p in self.ports:
            if p < MIN_PORT or p > MAX_PORT:
                raise ValueError(f"Invalid port: {p}")


@dataclass(frozen=True)
class ProbeResult:
    port: int
    outcome: PortOutcome
    elapsed_s: float

    @property
    def is_open(self) -> bool:
        return self.outcome.is_open

    @property
    def status(self) -> str:
        # timeouts and errors are reported the same as a refused connection
        return "open" if self.is_open else "closed"
