"""
Hard wrapping at an exact column limit, breaking words where needed.
"""
from __future__ import annotations

from .ansi import AnsiScanner, CharKind, rune_width
from .options import HardWrapOptions, resolve_options
from .writer import ReflowWriter, StringSink


class HardWrapWriter(ReflowWriter):
    """
    Streaming hard wrapper.

    Characters are counted one at a time; a character that would push the
    line past ``limit`` starts a new line. Wide characters are never split,
    so a line can end up one column short. The output is complete after
    every ``write()``.
    """

    def __init__(
        self,
        limit: int | None = None,
        *,
        newline: str | None = None,
        keep_newlines: bool | None = None,
        preserve_space: bool | None = None,
        tab_width: int | None = None,
        options: HardWrapOptions | None = None,
    ) -> None:
        super().__init__()
        self.options = resolve_options(
            HardWrapOptions,
            options,
            limit=limit,
            newline=newline,
            keep_newlines=keep_newlines,
            preserve_space=preserve_space,
            tab_width=tab_width,
        )
        self.limit = self.options.limit
        self.newline = self.options.newline
        self.keep_newlines = self.options.keep_newlines
        self.preserve_space = self.options.preserve_space
        self.tab_width = self.options.tab_width

        self._newline_chars = frozenset("\n\r" + self.newline)
        self._buf = StringSink()
        self._scanner = AnsiScanner()
        self._line_len = 0

    def _break_line(self) -> None:
        self._buf.write(self.newline)
        self._line_len = 0

    def _write_tab(self) -> None:
        # Each expanded column is wrapped like an ordinary space; without
        # preserve_space the rest of the tab is dropped at a break.
        for _ in range(self.tab_width):
            if self.limit > 0 and self._line_len >= self.limit:
                self._break_line()
                if not self.preserve_space:
                    return
            self._buf.write(" ")
            self._line_len += 1

    def _process(self, text: str) -> None:
        for ch in text:
            if self._scanner.feed(ch) is not CharKind.PRINTABLE:
                self._buf.write(ch)
                continue

            if ch in self._newline_chars:
                if self.keep_newlines:
                    self._break_line()
                continue

            if ch == "\t" and self.tab_width > 0:
                self._write_tab()
                continue

            width = rune_width(ch)
            if self.limit > 0 and self._line_len + width > self.limit:
                self._break_line()
                if ch == " " and not self.preserve_space:
                    continue

            self._buf.write(ch)
            self._line_len += width

    def getvalue(self) -> str:
        return self._buf.getvalue()


def hardwrap(s: str, limit: int, **kwargs) -> str:
    """
    Hard-wrap *s* at exactly *limit* columns.

    >>> hardwrap("HelloWorld", 4)
    'Hell\\noWor\\nld'
    """
    w = HardWrapWriter(limit, **kwargs)
    w.write(s)
    w.close()
    return w.getvalue()


def hardwrap_bytes(b: bytes, limit: int, **kwargs) -> bytes:
    w = HardWrapWriter(limit, **kwargs)
    w.write(b)
    w.close()
    return w.to_bytes()
