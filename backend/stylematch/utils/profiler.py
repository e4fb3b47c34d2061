"""
Per-request stage timing for the suggestion pipeline.

Each stage (occasion_lookup, catalog_fetch, partner_lookup, filter, score,
paginate, assemble) is timed and may report how many items it produced, so
one log line shows both where time went and where the catalog shrank.
"""
import time
import logging
from typing import Dict, Optional
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class Profiler:
    """Stage timings and item counts for one request"""

    def __init__(self):
        self.timings: Dict[str, float] = {}
        self.counts: Dict[str, int] = {}
        self._started: Dict[str, float] = {}

    def start(self, stage: str) -> None:
        self._started[stage] = time.perf_counter()

    def end(self, stage: str, items: Optional[int] = None) -> float:
        """Stop a stage; repeated runs of one stage add up. Returns seconds."""
        started = self._started.pop(stage, None)
        if started is None:
            logger.warning(f"Stage '{stage}' ended without being started")
            return 0.0

        elapsed = time.perf_counter() - started
        self.timings[stage] = self.timings.get(stage, 0.0) + elapsed
        if items is not None:
            self.count(stage, items)
        return elapsed

    def count(self, stage: str, items: int) -> None:
        self.counts[stage] = items

    @contextmanager
    def measure(self, stage: str):
        self.start(stage)
        try:
            yield self
        finally:
            self.end(stage)

    def get_timings(self) -> Dict[str, float]:
        return dict(self.timings)

    def get_total(self) -> float:
        return sum(self.timings.values())

    def summary(self) -> str:
        """One-line summary in stage order, e.g. 'filter=0.41ms(12) score=0.20ms(9)'"""
        parts = []
        for stage, elapsed in self.timings.items():
            part = f"{stage}={elapsed * 1000:.2f}ms"
            if stage in self.counts:
                part += f"({self.counts[stage]})"
            parts.append(part)
        parts.append(f"total={self.get_total() * 1000:.2f}ms")
        return " ".join(parts)

    def log_summary(self, prefix: str = "", level: int = logging.DEBUG) -> None:
        if not self.timings or not logger.isEnabledFor(level):
            return
        logger.log(level, f"{prefix}{self.summary()}")
