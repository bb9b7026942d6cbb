# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Structured logger with per-step counters and final summary.

Collects success/fail counts per build step (imports, queries, pages,
index) so the CLI can print a summary at the end of a run. Counters are
bumped from worker threads while pages render, hence the lock.
"""

from __future__ import annotations

import logging
import sys
import threading
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger configured with a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


@dataclass
class StepCounter:
    """Tracks success/fail counts for a single build step."""

    name: str
    ok: int = 0
    failed: int = 0


@dataclass
class PipelineSummary:
    """Accumulates counters across all build steps."""

    steps: dict[str, StepCounter] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def counter(self, name: str) -> StepCounter:
        """Get or create a counter for a named step."""
        with self._lock:
            if name not in self.steps:
                self.steps[name] = StepCounter(name=name)
            return self.steps[name]

    def record(self, name: str, ok: bool) -> None:
        """Bump the ok or failed count of a step."""
        counter = self.counter(name)
        with self._lock:
            if ok:
                counter.ok += 1
            else:
                counter.failed += 1

    def report(self) -> str:
        """Format a human-readable summary block."""
        lines: list[str] = ["", "Build Summary", "=" * 40]
        for step in self.steps.values():
            parts = [f"{step.name}: {step.ok} ok"]
            if step.failed:
                parts.append(f"{step.failed} failed")
            lines.append("  ".join(parts))
        lines.append("=" * 40)
        return "\n".join(lines)
