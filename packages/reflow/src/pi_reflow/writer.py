"""
Writer plumbing shared by the reflow transforms.

Every transform is a streaming writer: feed it chunks with ``write()``,
finish with ``close()`` and read the result with ``getvalue()``.
"""
from __future__ import annotations

import codecs
from typing import Protocol, runtime_checkable

from .errors import WriterClosedError


@runtime_checkable
class Sink(Protocol):
    """Anything text can be written to."""

    def write(self, text: str) -> object: ...


class StringSink:
    """In-memory sink collecting written text."""

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> int:
        self._parts.append(text)
        return len(text)

    def getvalue(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""


class ReflowWriter:
    """
    Base class for the streaming transforms.

    Subclasses implement ``_process(text)`` and, when they buffer content,
    ``_flush()``. Chunks may be ``str`` or UTF-8 ``bytes``; a multi-byte
    character split across two byte chunks is decoded correctly and invalid
    bytes become U+FFFD.
    """

    def __init__(self) -> None:
        self._closed = False
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, chunk: str | bytes) -> int:
        if self._closed:
            raise WriterClosedError(type(self).__name__)
        if isinstance(chunk, (bytes, bytearray)):
            text = self._decoder.decode(bytes(chunk))
        else:
            text = chunk
        if text:
            self._process(text)
        return len(chunk)

    def close(self) -> None:
        """Flush buffered content and refuse further writes. Idempotent."""
        if self._closed:
            return
        tail = self._decoder.decode(b"", final=True)
        if tail:
            self._process(tail)
        self._flush()
        self._closed = True

    def getvalue(self) -> str:
        raise NotImplementedError

    def to_bytes(self) -> bytes:
        return self.getvalue().encode("utf-8")

    def __str__(self) -> str:
        return self.getvalue()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _process(self, text: str) -> None:
        raise NotImplementedError

    def _flush(self) -> None:
        pass
