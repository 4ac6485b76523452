# MIT License (see LICENSE)
"""
Per-phase timing for the simulation step.

Simulation.step() reports two sections when a profiler is attached:
"forces" (accumulator reset + pairwise gravity) and "integrate" (Euler
update of every body).

Example:
    profiler = Profiler()
    sim = Simulation.from_config(default_config(), profiler=profiler)
    sim.run(1000)
    print(profiler.stats.summary()["forces"]["mean_ms"])
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

import time


@dataclass
class ProfileStats:
    """Raw timing samples (seconds) keyed by section name."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Summary statistics per section.

        Returns:
            Dict mapping section name to:
            - 'n': sample count
            - 'mean_ms': average time in milliseconds
            - 'max_ms': slowest sample in milliseconds
            - 'total_ms': sum of all samples in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            total = sum(times)
            out[name] = {
                "n": len(times),
                "mean_ms": 1e3 * total / len(times),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out


class Profiler:
    """Wall-clock profiler built on time.perf_counter()."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under name."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def reset(self) -> None:
        """Drop all recorded samples."""
        self.stats = ProfileStats()
