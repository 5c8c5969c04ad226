"""Data models for line classification and region building."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LineCategory(str, Enum):
    """Semantic category of a single screenplay line."""

    COMMENT = "comment"
    SCENE_HEADING = "scene_heading"
    CHARACTER = "character"
    PARENTHETICAL = "parenthetical"
    TRANSITION = "transition"
    NOTE = "note"
    PAGE_BREAK = "page_break"
    SYNOPSIS_SEPARATOR = "synopsis_separator"
    SCENE_NUMBER = "scene_number"
    EMPHASIS = "emphasis"
    UNDERLINE = "underline"
    BLANK = "blank"
    DIALOGUE = "dialogue"
    ACTION = "action"

    @property
    def token(self) -> str:
        """Editor token key the highlighting layer styles this category with."""
        return _TOKENS[self]


_TOKENS: dict[LineCategory, str] = {
    LineCategory.COMMENT: "comment",
    LineCategory.SCENE_HEADING: "sceneHeading",
    LineCategory.CHARACTER: "character",
    LineCategory.PARENTHETICAL: "parenthetical",
    LineCategory.TRANSITION: "transition",
    LineCategory.NOTE: "note",
    LineCategory.PAGE_BREAK: "pageBreak",
    LineCategory.SYNOPSIS_SEPARATOR: "synopsisSeparator",
    LineCategory.SCENE_NUMBER: "sceneNumber",
    LineCategory.EMPHASIS: "emphasis",
    LineCategory.UNDERLINE: "underline",
    LineCategory.BLANK: "emptyLine",
    LineCategory.DIALOGUE: "dialogue",
    LineCategory.ACTION: "action",
}


class RegionKind(str, Enum):
    """Kinds of collapsible regions."""

    SCENE = "scene"
    DIALOGUE_BLOCK = "dialogue_block"


@dataclass(frozen=True)
class Line:
    """One line of the buffer, 1-based, without its newline."""

    index: int
    text: str


@dataclass(frozen=True)
class ClassifiedLine:
    """A line paired with its category."""

    index: int
    category: LineCategory
    text: str = ""


@dataclass(frozen=True)
class Region:
    """A foldable line range, 1-based.

    ``start`` is the first line after the opening heading or cue. A region
    closed mid-scan ends at the index of the line that closed it, so that
    line is not part of the region. A region still open at end of input
    ends at the last line, which is part of it.
    """

    start: int
    end: int
    kind: RegionKind

    @property
    def span(self) -> int:
        """Number of lines between start and end (may be <= 0 if kept empty)."""
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end

    def as_range(self) -> tuple[int, int]:
        """Return the ``(start, end)`` pair a folding host consumes."""
        return (self.start, self.end)

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start, "end": self.end, "kind": self.kind.value}

