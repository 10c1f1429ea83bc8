import time
from typing import Optional

from .traversal import scrub_structure as scrub_structure


class Timer:
    """
    Wall clock stopwatch, usable as a context manager.

    ``elapsed_ms`` keeps running until :meth:`stop` is called.
    """

    def __init__(self) -> None:
        self._started: Optional[float] = None
        self._stopped: Optional[float] = None

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.stop()

    def start(self) -> None:
        self._started = time.perf_counter()
        self._stopped = None

    def stop(self) -> None:
        if self._started is None:
            raise RuntimeError("Timer was not started")
        self._stopped = time.perf_counter()

    @property
    def elapsed_ms(self) -> float:
        """Elapsed time in milliseconds."""
        if self._started is None:
            raise RuntimeError("Timer was not started")
        end = self._stopped if self._stopped is not None else time.perf_counter()
        return (end - self._started) * 1000
