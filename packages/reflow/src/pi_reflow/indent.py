"""
Line indentation that keeps the indent itself unstyled.

Before the indent is inserted any open style is reset; afterwards the
previous style is restored, so the line content keeps its colors while the
leading padding stays plain.
"""
from __future__ import annotations

from .ansi import AnsiScanner, AnsiWriter, CharKind
from .options import IndentOptions, WriteFunc, resolve_options
from .writer import ReflowWriter, Sink


class IndentWriter(ReflowWriter):
    """
    Streaming indenter.

    The indent fires on the first printable character of each line (a
    newline counts, so empty lines are indented too). Escape sequences at
    the start of a line are passed through before it.

    With ``indent_func`` the callback is invoked once per indent unit with
    the underlying writer; otherwise ``indent`` spaces are written. Pass
    ``forward`` to send the output to another sink instead of buffering it.
    """

    def __init__(
        self,
        indent: int | None = None,
        indent_func: WriteFunc | None = None,
        *,
        forward: Sink | None = None,
        options: IndentOptions | None = None,
    ) -> None:
        super().__init__()
        self.options = resolve_options(IndentOptions, options, indent=indent, indent_func=indent_func)
        self.indent = self.options.indent
        self.indent_func = self.options.indent_func

        self._ansi = AnsiWriter(forward)
        self._scanner = AnsiScanner()
        self._skip_indent = False

    def _write_indent(self) -> None:
        self._ansi.reset_ansi()
        if self.indent_func is not None:
            for _ in range(self.indent):
                self.indent_func(self._ansi)
        else:
            self._ansi.write(" " * self.indent)
        self._ansi.restore_ansi()

    def _process(self, text: str) -> None:
        start = 0
        for i, ch in enumerate(text):
            if self._scanner.feed(ch) is not CharKind.PRINTABLE:
                continue
            if not self._skip_indent:
                if self.indent > 0:
                    self._ansi.write(text[start:i])
                    start = i
                    self._write_indent()
                self._skip_indent = True
            if ch == "\n":
                self._skip_indent = False
        self._ansi.write(text[start:])

    def getvalue(self) -> str:
        return self._ansi.getvalue()


def indent(s: str, width: int, indent_func: WriteFunc | None = None) -> str:
    """
    Indent every line of *s* by *width* units.

    >>> indent("foo\\nbar", 4)
    '    foo\\n    bar'
    """
    w = IndentWriter(width, indent_func)
    w.write(s)
    w.close()
    return w.getvalue()


def indent_bytes(b: bytes, width: int, indent_func: WriteFunc | None = None) -> bytes:
    w = IndentWriter(width, indent_func)
    w.write(b)
    w.close()
    return w.to_bytes()
