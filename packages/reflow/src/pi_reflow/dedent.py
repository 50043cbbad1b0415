"""Remove the common leading whitespace from every line."""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def _leading_whitespace(line: str) -> int:
    # An escape sequence ends the indent even if blanks follow it.
    count = 0
    for ch in line:
        if ch not in " \t":
            break
        count += 1
    return count


def _is_blank(line: str) -> bool:
    return all(ch in " \t" for ch in line)


def dedent(s: str) -> str:
    """
    Strip the smallest indent shared by all non-blank lines.

    Spaces and tabs both count as one column. Whitespace-only lines become
    empty; if every line is blank, or any line is unindented, *s* is
    returned unchanged.
    """
    lines = s.split("\n")
    indents = [_leading_whitespace(line) for line in lines if not _is_blank(line)]
    min_indent = min(indents, default=0)
    if min_indent == 0:
        return s

    logger.debug("removing %d leading columns from %d lines", min_indent, len(lines))
    return "\n".join("" if _is_blank(line) else line[min_indent:] for line in lines)

