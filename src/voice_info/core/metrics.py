from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepTiming:
    name: str
    elapsed_ms: float


class Timer:
    """Records wall-clock latency of the lookup and synthesis steps."""

    def __init__(self) -> None:
        self._steps: list[StepTiming] = []

    @contextmanager
    def step(self, name: str) -> Iterator[None]:
        start = time.perf_counter()
        yield
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        self._steps.append(StepTiming(name=name, elapsed_ms=elapsed_ms))
        logger.debug("%s took %.1f ms", name, elapsed_ms)

    def measure(self, name: str, fn: Callable[[], T]) -> T:
        with self.step(name):
            return fn()

    @property
    def steps(self) -> list[StepTiming]:
        return list(self._steps)

    def summary(self) -> Dict[str, float]:
        out: Dict[str, float] = {s.name: s.elapsed_ms for s in self._steps}
        out["total_ms"] = sum(s.elapsed_ms for s in self._steps)
        return out
