"""
Option models and defaults for the reflow writers.

Each writer resolves its keyword arguments into one of these frozen models
at construction time, so bad configuration fails before any text is read.
"""
from __future__ import annotations

from typing import Any, Callable, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_NEWLINE = "\n"
DEFAULT_TAB_WIDTH = 4
DEFAULT_BREAKPOINTS: tuple[str, ...] = (" ", "-")
DEFAULT_NEWLINES: tuple[str, ...] = ("\n",)

# Called once per indent unit / missing pad column with the writer to emit into.
WriteFunc = Callable[[Any], None]


class _Options(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# ─── Wrapping ─────────────────────────────────────────────────────────────────

class WordWrapOptions(_Options):
    limit: int = Field(ge=0)
    breakpoints: tuple[str, ...] = DEFAULT_BREAKPOINTS
    newline: tuple[str, ...] = DEFAULT_NEWLINES
    keep_newlines: bool = True

    @field_validator("breakpoints", "newline")
    @classmethod
    def check_single_chars(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for ch in value:
            if len(ch) != 1:
                raise ValueError(f"expected single characters, got {ch!r}")
        return value


class HardWrapOptions(_Options):
    limit: int = Field(ge=0)
    newline: str = Field(default=DEFAULT_NEWLINE, min_length=1)
    keep_newlines: bool = True
    preserve_space: bool = False
    tab_width: int = Field(default=DEFAULT_TAB_WIDTH, ge=0)


# ─── Truncation ───────────────────────────────────────────────────────────────

class TruncateOptions(_Options):
    width: int = Field(ge=0)
    tail: str = ""


# ─── Indentation / padding / margins ──────────────────────────────────────────

class IndentOptions(_Options):
    indent: int = Field(ge=0)
    indent_func: WriteFunc | None = None


class PaddingOptions(_Options):
    width: int = Field(ge=0)
    pad_func: WriteFunc | None = None


class MarginOptions(_Options):
    width: int = Field(default=0, ge=0)
    top: int = Field(default=0, ge=0)
    bottom: int = Field(default=0, ge=0)
    left: int = Field(default=0, ge=0)
    right: int = Field(default=0, ge=0)


OptionsT = TypeVar("OptionsT", bound=_Options)


def resolve_options(model: type[OptionsT], options: OptionsT | None, **overrides: Any) -> OptionsT:
    """Merge *overrides* (None values ignored) over *options* and validate."""
    data: dict[str, Any] = options.model_dump() if options is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return model.model_validate(data)
