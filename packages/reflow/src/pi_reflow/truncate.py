"""
Width-limited truncation with an optional tail such as ``"..."``.

The tail is counted inside the width. Escape sequences before the cut are
kept; if a style is still open at the cut, ``ESC[0m`` follows the tail.
"""
from __future__ import annotations

import logging

from .ansi import AnsiScanner, AnsiWriter, CharKind, printable_width, rune_width
from .options import TruncateOptions, resolve_options
from .writer import ReflowWriter

logger = logging.getLogger(__name__)


class TruncateWriter(ReflowWriter):
    """
    Streaming truncation.

    The running width is kept across ``write()`` calls. Once the cut has
    been made every later chunk is ignored.
    """

    def __init__(
        self,
        width: int | None = None,
        tail: str | None = None,
        *,
        options: TruncateOptions | None = None,
    ) -> None:
        super().__init__()
        self.options = resolve_options(TruncateOptions, options, width=width, tail=tail)
        self.width = self.options.width
        self.tail = self.options.tail

        self._ansi = AnsiWriter()
        self._scanner = AnsiScanner()
        self._tail_width = printable_width(self.tail)
        self._cur_width = 0
        self._done = False

    @property
    def truncated(self) -> bool:
        return self._done

    def _cut(self) -> None:
        self._ansi.write(self.tail)
        if self._ansi.last_sequence:
            self._ansi.reset_ansi()
        self._done = True

    def _tail_only(self) -> None:
        logger.debug("tail %r is wider than %d columns, emitting tail only", self.tail, self.width)
        self._ansi.write(self.tail)
        self._done = True

    def _process(self, text: str) -> None:
        if self._done:
            return

        if self.width < self._tail_width:
            self._tail_only()
            return

        available = self.width - self._tail_width
        for i, ch in enumerate(text):
            if self._scanner.feed(ch) is not CharKind.PRINTABLE:
                continue
            width = rune_width(ch)
            if self._cur_width + width > available:
                self._ansi.write(text[:i])
                logger.debug("truncated at %d of %d columns", self._cur_width, self.width)
                self._cut()
                return
            self._cur_width += width
        self._ansi.write(text)

    def _flush(self) -> None:
        if not self._done and self.width < self._tail_width:
            self._tail_only()

    def getvalue(self) -> str:
        return self._ansi.getvalue()


def truncate(s: str, width: int, tail: str = "") -> str:
    """
    Truncate *s* to *width* columns, tail included.

    >>> truncate("Hello World", 8, tail="...")
    'Hello...'
    """
    w = TruncateWriter(width, tail)
    w.write(s)
    w.close()
    return w.getvalue()


def truncate_with_tail(s: str, width: int, tail: str) -> str:
    return truncate(s, width, tail)


def truncate_bytes(b: bytes, width: int, tail: str = "") -> bytes:
    w = TruncateWriter(width, tail)
    w.write(b)
    w.close()
    return w.to_bytes()
