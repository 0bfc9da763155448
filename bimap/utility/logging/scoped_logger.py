import datetime
import logging
import time
from typing import Optional


class ScopedLogger:
    """logs when a block begins and how long it took once it completes"""

    def __init__(self, message: str, logging_level=logging.INFO):
        self.timer = TimedLogger(message=message, logging_level=logging_level)

    def __enter__(self):
        self.timer.begin()
        return self.timer

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.end()


class TimedLogger:
    def __init__(self, message: str, logging_level=logging.INFO):
        self.message = message
        self.logging_level = logging_level
        self.timer: Optional[int] = None
        self.elapsed: Optional[datetime.timedelta] = None

    def begin(self):
        self.timer = time.perf_counter_ns()
        logging.log(self.logging_level, f"beginning {self.message}")

    def end(self) -> datetime.timedelta:
        if self.timer is None:
            raise RuntimeError(f"{self.__class__.__name__}: end() called before begin() for {self.message}")

        elapsed = time.perf_counter_ns() - self.timer
        self.elapsed = datetime.timedelta(microseconds=elapsed // 1000)
        logging.log(self.logging_level, f"completed {self.message} in {self.elapsed}")
        return self.elapsed
