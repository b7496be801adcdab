"""Small helpers shared by the adapter and the CLI."""

from __future__ import annotations

from .ids import generate_id
from .time import Clock, Timer, now_monotonic_s

__all__ = [
    "Clock",
    "Timer",
    "generate_id",
    "now_monotonic_s",
]
