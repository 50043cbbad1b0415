"""Blank space around a block of text: top/bottom lines, left/right columns."""
from __future__ import annotations

from .ansi import printable_width
from .options import MarginOptions, resolve_options
from .writer import ReflowWriter, StringSink


class MarginWriter(ReflowWriter):
    """
    Buffers everything written and applies the margins on ``close()``.

    Empty lines are left empty. ``right`` spaces follow every other line;
    when ``right`` is 0 and ``width`` is set, lines are instead filled up to
    ``width`` columns in total (left margin included).
    """

    def __init__(
        self,
        width: int | None = None,
        *,
        top: int | None = None,
        bottom: int | None = None,
        left: int | None = None,
        right: int | None = None,
        options: MarginOptions | None = None,
    ) -> None:
        super().__init__()
        self.options = resolve_options(
            MarginOptions, options, width=width, top=top, bottom=bottom, left=left, right=right
        )
        self._content = StringSink()
        self._result = ""

    def _process(self, text: str) -> None:
        self._content.write(text)

    def _margin_line(self, line: str) -> str:
        if not line:
            return line
        opts = self.options
        if opts.right:
            fill = opts.right
        elif opts.width:
            fill = max(0, opts.width - opts.left - printable_width(line))
        else:
            fill = 0
        return " " * opts.left + line + " " * fill

    def _flush(self) -> None:
        lines = [self._margin_line(line) for line in self._content.getvalue().split("\n")]
        self._result = "\n".join([""] * self.options.top + lines + [""] * self.options.bottom)

    def getvalue(self) -> str:
        return self._result


def margin(s: str, width: int = 0, **kwargs) -> str:
    """
    Surround *s* with margins.

    >>> margin("foo", top=1, left=2, right=2, bottom=1)
    '\\n  foo  \\n'
    """
    w = MarginWriter(width, **kwargs)
    w.write(s)
    w.close()
    return w.getvalue()
