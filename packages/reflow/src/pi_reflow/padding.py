"""Right-pad every line to a fixed width."""
from __future__ import annotations

from .ansi import AnsiScanner, AnsiWriter, CharKind, rune_width
from .options import PaddingOptions, WriteFunc, resolve_options
from .writer import ReflowWriter, Sink


class PaddingWriter(ReflowWriter):
    """
    Streaming padder. Lines shorter than ``width`` are filled with spaces
    (or one ``pad_func`` call per missing column); the last line is padded
    on ``close()``.
    """

    def __init__(
        self,
        width: int | None = None,
        pad_func: WriteFunc | None = None,
        *,
        forward: Sink | None = None,
        options: PaddingOptions | None = None,
    ) -> None:
        super().__init__()
        self.options = resolve_options(PaddingOptions, options, width=width, pad_func=pad_func)
        self.width = self.options.width
        self.pad_func = self.options.pad_func

        self._ansi = AnsiWriter(forward)
        self._scanner = AnsiScanner()
        self._line_len = 0

    def _pad(self) -> None:
        missing = self.width - self._line_len
        if self.width == 0 or missing <= 0:
            return
        if self.pad_func is not None:
            for _ in range(missing):
                self.pad_func(self._ansi)
        else:
            self._ansi.write(" " * missing)

    def _process(self, text: str) -> None:
        start = 0
        for i, ch in enumerate(text):
            if self._scanner.feed(ch) is not CharKind.PRINTABLE:
                continue
            self._line_len += rune_width(ch)
            if ch == "\n":
                self._ansi.write(text[start:i])
                start = i
                self._pad()
                self._ansi.reset_ansi()
                self._line_len = 0
        self._ansi.write(text[start:])

    def _flush(self) -> None:
        if self._line_len != 0:
            self._pad()

    def getvalue(self) -> str:
        return self._ansi.getvalue()


def pad(s: str, width: int, pad_func: WriteFunc | None = None) -> str:
    w = PaddingWriter(width, pad_func)
    w.write(s)
    w.close()
    return w.getvalue()


def pad_bytes(b: bytes, width: int, pad_func: WriteFunc | None = None) -> bytes:
    w = PaddingWriter(width, pad_func)
    w.write(b)
    w.close()
    return w.to_bytes()
