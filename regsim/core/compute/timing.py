"""
Wall-clock timing for backends.

Every backend wraps its work in named sections so the Result it returns
can say where the time went: one fit splits into decomposition, solve
and statistics; a trial run into the trial loop and the summary.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total elapsed time plus accumulated named sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('trials'):
            for b in range(trials):
                ...
        timer.stop()
        timer.result()
        # {'total_seconds': 0.41, 'trials': 0.40}

    A section entered more than once (for example inside a loop)
    accumulates across entries.
    """

    def __init__(self):
        self._began: float | None = None
        self._total: float | None = None
        self._elapsed: dict[str, float] = {}

    def start(self) -> None:
        self._began = time.perf_counter()
        self._total = None

    def stop(self) -> None:
        if self._began is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent inside the block to section `name`."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._elapsed[name] = (self._elapsed.get(name, 0.0)
                                   + time.perf_counter() - t0)

    def result(self) -> dict[str, float]:
        """
        {'total_seconds': ..., <section>: ...}.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._elapsed}
