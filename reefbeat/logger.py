"""A small severity-filtered trace logger."""

from __future__ import annotations

import sys
import time
from enum import IntEnum
from typing import TextIO


class Severity(IntEnum):
    VERBOSE = 0
    DEBUG = 1
    EVENT = 2
    ERROR = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Logger:
    """Writes timestamped lines at or above a minimum severity."""

    def __init__(
        self,
        severity: Severity = Severity.VERBOSE,
        use_console: bool = False,
        start_time: float | None = None,
        path: str = "Trace.log",
    ) -> None:
        self.min_level = Severity(severity)
        self.start_time = time.time() if start_time is None else start_time
        self._owns_stream = not use_console
        self._stream: TextIO = (
            sys.stdout if use_console else open(path, "w", encoding="utf-8")
        )

    def log(self, severity: Severity, message: str) -> None:
        severity = Severity(severity)
        if severity >= self.min_level:
            self._stream.write(
                f"[{self.seconds_since_start():.4f}]\t{severity.label}\t{message}\n"
            )

    def error(self, text: str) -> None:
        self.log(Severity.ERROR, text)

    def event(self, text: str) -> None:
        self.log(Severity.EVENT, text)

    def debug(self, text: str) -> None:
        self.log(Severity.DEBUG, text)

    def verbose(self, text: str) -> None:
        self.log(Severity.VERBOSE, text)

    def seconds_since_start(self) -> float:
        return time.time() - self.start_time

    def close(self) -> None:
        """Flush, and close the log file if this logger opened one."""
        if self._stream.closed:
            return
        self._stream.flush()
        if self._owns_stream:
            self._stream.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()