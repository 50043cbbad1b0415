"""
Word wrapping at whitespace and breakpoint characters.

Words are never split: a word wider than the limit is emitted on a line of
its own and overflows it. Escape sequences travel with the word they are
embedded in and never count toward the line width.
"""
from __future__ import annotations

import logging
from typing import Iterable

from .ansi import AnsiScanner, CharKind, rune_width
from .options import WordWrapOptions, resolve_options
from .writer import ReflowWriter, StringSink

logger = logging.getLogger(__name__)

# Whitespace that glues the words on either side together.
NO_BREAK_SPACES = frozenset("\u00a0\u2007\u202f")


class WordWrapWriter(ReflowWriter):
    """
    Streaming word wrapper.

    Pending text is held in two buffers: the word being read and the run of
    whitespace before it. Both are only placed on the line once the word
    ends, so ``close()`` must be called before the result is complete.
    """

    def __init__(
        self,
        limit: int | None = None,
        *,
        breakpoints: Iterable[str] | None = None,
        newline: Iterable[str] | None = None,
        keep_newlines: bool | None = None,
        options: WordWrapOptions | None = None,
    ) -> None:
        super().__init__()
        self.options = resolve_options(
            WordWrapOptions,
            options,
            limit=limit,
            breakpoints=tuple(breakpoints) if breakpoints is not None else None,
            newline=tuple(newline) if newline is not None else None,
            keep_newlines=keep_newlines,
        )
        self.limit = self.options.limit
        self.breakpoints = frozenset(self.options.breakpoints)
        self.newline = frozenset(self.options.newline)
        self.keep_newlines = self.options.keep_newlines

        self._buf = StringSink()
        self._scanner = AnsiScanner()
        self._line_len = 0
        self._space: list[str] = []
        self._word: list[str] = []
        self._word_len = 0

    def _fits(self, width: int) -> bool:
        return self.limit == 0 or self._line_len + width <= self.limit

    def _emit(self, text: str, width: int) -> None:
        self._buf.write(text)
        self._line_len += width

    def _add_newline(self) -> None:
        self._buf.write("\n")
        self._line_len = 0
        self._space = []

    def _space_width(self) -> int:
        # Tabs and other control whitespace count as one column.
        return sum(rune_width(ch) or 1 for ch in self._space)

    def _flush_space(self) -> None:
        """Place the pending whitespace on the line if it fits, else drop it."""
        if self._space:
            width = self._space_width()
            if self._fits(width):
                self._emit("".join(self._space), width)
        self._space = []

    def _flush_word(self) -> None:
        if not self._word:
            return

        space_len = self._space_width()
        if self._line_len == 0:
            # leading whitespace only survives when explicit line breaks are kept
            if self.keep_newlines:
                self._flush_space()
            self._space = []
        elif self.limit > 0 and self._line_len + space_len + self._word_len > self.limit:
            self._add_newline()
        elif self._space:
            self._emit("".join(self._space), space_len)
            self._space = []

        self._emit("".join(self._word), self._word_len)
        self._word = []
        self._word_len = 0

    def _process(self, text: str) -> None:
        for ch in text:
            if self._scanner.feed(ch) is not CharKind.PRINTABLE:
                self._word.append(ch)
                continue

            if ch in self.newline:
                if self.keep_newlines:
                    self._flush_word()
                    self._flush_space()
                    self._add_newline()
                else:
                    self._flush_word()
                    if not self._space or self._space[-1] != " ":
                        self._space.append(" ")
            elif ch.isspace() and ch not in NO_BREAK_SPACES:
                self._flush_word()
                self._space.append(ch)
            elif ch in self.breakpoints:
                if self._word:
                    self._flush_word()
                else:
                    self._flush_space()
                self._emit(ch, rune_width(ch))
            else:
                self._word.append(ch)
                self._word_len += rune_width(ch)

    def _flush(self) -> None:
        self._flush_word()
        self._flush_space()
        if not self.keep_newlines:
            value = self._buf.getvalue()
            stripped = value.rstrip(" \t")
            if stripped != value:
                logger.debug("stripped %d trailing blanks", len(value) - len(stripped))
                self._buf = StringSink()
                self._buf.write(stripped)

    def getvalue(self) -> str:
        return self._buf.getvalue()


def wordwrap(s: str, limit: int, **kwargs) -> str:
    """
    Word-wrap *s* to *limit* columns.

    >>> wordwrap("foo bar foo", 4)
    'foo\\nbar\\nfoo'
    """
    w = WordWrapWriter(limit, **kwargs)
    w.write(s)
    w.close()
    return w.getvalue()


def wordwrap_bytes(b: bytes, limit: int, **kwargs) -> bytes:
    w = WordWrapWriter(limit, **kwargs)
    w.write(b)
    w.close()
    return w.to_bytes()
