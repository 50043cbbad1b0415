"""Exceptions raised by the reflow writers."""
from __future__ import annotations


class ReflowError(Exception):
    """Base class for errors raised by pi_reflow."""


class WriterClosedError(ReflowError):
    """Raised when text is written to a writer that has already been closed."""

    def __init__(self, writer_name: str) -> None:
        super().__init__(f"{writer_name} is closed")
        self.writer_name = writer_name
