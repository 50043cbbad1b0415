"""
pi_reflow — ANSI-aware text reflow for terminal output.

Word wrap, hard wrap, truncation, indentation, padding, margins and dedent.
Escape sequences are zero-width and are never split; styles are reset and
restored around injected text.
"""
from .ansi import (
    MARKER,
    RESET,
    AnsiScanner,
    AnsiWriter,
    CharKind,
    is_terminator,
    printable_width,
    rune_width,
    strip_ansi,
)
from .dedent import dedent
from .errors import ReflowError, WriterClosedError
from .hardwrap import HardWrapWriter, hardwrap, hardwrap_bytes
from .indent import IndentWriter, indent, indent_bytes
from .margin import MarginWriter, margin
from .options import (
    DEFAULT_BREAKPOINTS,
    DEFAULT_NEWLINE,
    DEFAULT_NEWLINES,
    DEFAULT_TAB_WIDTH,
    HardWrapOptions,
    IndentOptions,
    MarginOptions,
    PaddingOptions,
    TruncateOptions,
    WordWrapOptions,
)
from .padding import PaddingWriter, pad, pad_bytes
from .truncate import TruncateWriter, truncate, truncate_bytes, truncate_with_tail
from .wordwrap import WordWrapWriter, wordwrap, wordwrap_bytes
from .writer import ReflowWriter, Sink, StringSink

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "DEFAULT_NEWLINE",
    "DEFAULT_NEWLINES",
    "DEFAULT_TAB_WIDTH",
    "MARKER",
    "RESET",
    "AnsiScanner",
    "AnsiWriter",
    "CharKind",
    "HardWrapOptions",
    "HardWrapWriter",
    "IndentOptions",
    "IndentWriter",
    "MarginOptions",
    "MarginWriter",
    "PaddingOptions",
    "PaddingWriter",
    "ReflowError",
    "ReflowWriter",
    "Sink",
    "StringSink",
    "TruncateOptions",
    "TruncateWriter",
    "WordWrapOptions",
    "WordWrapWriter",
    "WriterClosedError",
    "dedent",
    "hardwrap",
    "hardwrap_bytes",
    "indent",
    "indent_bytes",
    "is_terminator",
    "margin",
    "pad",
    "pad_bytes",
    "printable_width",
    "rune_width",
    "strip_ansi",
    "truncate",
    "truncate_bytes",
    "truncate_with_tail",
    "wordwrap",
    "wordwrap_bytes",
]
