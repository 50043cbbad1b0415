"""
ANSI escape sequence handling shared by every reflow writer.

Provides:
- is_terminator(): does a character end an escape sequence
- rune_width(): terminal column width of a single character
- printable_width(): column width of a string, escape sequences excluded
- strip_ansi(): remove escape sequences from a string
- AnsiScanner: single-character classifier (marker / sequence / terminator / printable)
- AnsiWriter: tracks the active SGR style so it can be reset and restored
"""
from __future__ import annotations

from enum import Enum

from wcwidth import wcwidth

from .writer import Sink, StringSink

MARKER = "\x1b"
RESET = "\x1b[0m"


def is_terminator(ch: str) -> bool:
    """True for characters in 0x40-0x5A or 0x61-0x7A, which end a sequence."""
    code = ord(ch)
    return 0x40 <= code <= 0x5A or 0x61 <= code <= 0x7A


def rune_width(ch: str) -> int:
    """Column width of one character: 2 for wide CJK/emoji, 0 for combining and control."""
    w = wcwidth(ch)
    if w < 0:
        return 0
    return w


# ─────────────────────────────────────────────────────────────────────────────
# Scanner
# ─────────────────────────────────────────────────────────────────────────────

class CharKind(Enum):
    MARKER = "marker"
    SEQUENCE = "sequence"
    TERMINATOR = "terminator"
    PRINTABLE = "printable"


class AnsiScanner:
    """
    Classifies a character stream into escape sequences and printable runes.

    A sequence starts at ESC and ends at the first terminator character.
    There is no validation: an unterminated sequence swallows the rest of
    the stream as zero-width characters.
    """

    __slots__ = ("in_sequence",)

    def __init__(self) -> None:
        self.in_sequence = False

    def feed(self, ch: str) -> CharKind:
        if self.in_sequence:
            if is_terminator(ch):
                self.in_sequence = False
                return CharKind.TERMINATOR
            return CharKind.SEQUENCE
        if ch == MARKER:
            self.in_sequence = True
            return CharKind.MARKER
        return CharKind.PRINTABLE


def strip_ansi(s: str) -> str:
    """Return only the printable characters of *s*."""
    if MARKER not in s:
        return s
    scanner = AnsiScanner()
    return "".join(ch for ch in s if scanner.feed(ch) is CharKind.PRINTABLE)


def printable_width(s: str) -> int:
    """Visible column width of *s*; escape sequences count as zero."""
    return sum(rune_width(ch) for ch in strip_ansi(s))


# ─────────────────────────────────────────────────────────────────────────────
# Style tracking writer
# ─────────────────────────────────────────────────────────────────────────────

class AnsiWriter:
    """
    Forwards text to a sink while remembering the last active style.

    Only completed sequences ending in ``m`` count as style. ``ESC[0m``
    clears the remembered style; any other ``m`` sequence replaces it and
    marks a style change as pending. Cursor movement and other sequences
    leave both untouched.

    Writers that inject content into a styled stream (indentation, a
    truncation tail, padding) call ``reset_ansi()`` before the injected text
    and ``restore_ansi()`` after it.
    """

    def __init__(self, forward: Sink | None = None) -> None:
        self._buffer = StringSink() if forward is None else None
        self._forward: Sink = self._buffer if self._buffer is not None else forward
        self._scanner = AnsiScanner()
        self._seq: list[str] = []
        self._last_seq = ""
        self._seq_changed = False

    @property
    def last_sequence(self) -> str:
        return self._last_seq

    @property
    def style_pending(self) -> bool:
        return self._seq_changed

    def write(self, text: str) -> int:
        for ch in text:
            kind = self._scanner.feed(ch)
            if kind is CharKind.MARKER:
                self._seq = [ch]
            elif kind is CharKind.SEQUENCE:
                self._seq.append(ch)
            elif kind is CharKind.TERMINATOR:
                self._seq.append(ch)
                self._end_sequence("".join(self._seq), ch)
                self._seq = []
        if text:
            self._forward.write(text)
        return len(text)

    def _end_sequence(self, seq: str, terminator: str) -> None:
        if seq == RESET:
            self._last_seq = ""
            self._seq_changed = False
        elif terminator == "m":
            self._last_seq = seq
            self._seq_changed = True

    def reset_ansi(self) -> None:
        """Emit ``ESC[0m`` if a style is open, then mark it closed."""
        if not self._seq_changed:
            return
        self._forward.write(RESET)
        self._seq_changed = False

    def restore_ansi(self) -> None:
        """Re-emit the last style so following text continues in it."""
        if not self._last_seq:
            return
        self._forward.write(self._last_seq)
        self._seq_changed = True

    def getvalue(self) -> str:
        if self._buffer is None:
            return ""
        return self._buffer.getvalue()

    def __str__(self) -> str:
        return self.getvalue()
