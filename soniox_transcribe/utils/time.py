from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, TypeAlias


Clock: TypeAlias = Callable[[], float]


def now_monotonic_s() -> float:
    return time.monotonic()


@dataclass(slots=True)
class Timer:
    start_s: float
    clock: Clock = field(default=now_monotonic_s, repr=False)

    @classmethod
    def start(cls, clock: Clock = now_monotonic_s) -> "Timer":
        return cls(start_s=clock(), clock=clock)

    def elapsed_s(self) -> float:
        return max(0.0, self.clock() - self.start_s)

    def elapsed_ms(self) -> float:
        return self.elapsed_s() * 1000
