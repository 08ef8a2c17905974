"""Wall-clock timing for benchmarking tree operations."""

import sys
import time
from contextlib import contextmanager
from typing import Iterator, List, Optional, TextIO, Tuple


class Timer:
    """
    Times labelled sections and prints each result when it stops.

    Results are kept in ``results`` as (label, seconds) pairs.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.results: List[Tuple[str, float]] = []
        self._label: Optional[str] = None
        self._start = 0.0

    def start(self, label: str) -> None:
        self._label = label
        self._start = time.perf_counter()

    def stop(self) -> float:
        """
        Stop the running section and report it.

        Returns:
            Elapsed seconds

        Raises:
            RuntimeError: If no section is running
        """
        if self._label is None:
            raise RuntimeError("Timer.stop() called without start()")

        elapsed = time.perf_counter() - self._start
        label, self._label = self._label, None
        self.results.append((label, elapsed))

        stream = self.stream if self.stream is not None else sys.stdout
        print(f"{label}: {elapsed:.6f} s", file=stream)
        return elapsed

    @contextmanager
    def section(self, label: str) -> Iterator[None]:
        self.start(label)
        try:
            yield
        finally:
            self.stop()
