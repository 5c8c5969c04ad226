"""Whole-buffer parsing and the draft holder that re-parses on every edit."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from scriptfold.config import get_logger, get_settings
from scriptfold.exceptions import ScriptFoldFileNotFoundError
from scriptfold.parser.classifier import classify_lines
from scriptfold.parser.models import (
    ClassifiedLine,
    Line,
    LineCategory,
    Region,
    RegionKind,
)
from scriptfold.parser.regions import build_regions
from scriptfold.utils import ScreenplayUtils

logger = get_logger(__name__)

OutlineListener = Callable[["ScriptOutline"], None]


def split_lines(text: str) -> list[Line]:
    """Split a buffer into 1-based lines.

    Splits on ``"\\n"`` and drops one trailing ``"\\r"`` per line. An empty
    buffer is one empty line and a trailing newline adds an empty last line,
    the way an editor counts lines.
    """
    return [
        Line(index=number, text=raw[:-1] if raw.endswith("\r") else raw)
        for number, raw in enumerate(text.split("\n"), start=1)
    ]


@dataclass
class SceneSummary:
    """A scene region with the labels derived from its heading."""

    region: Region
    heading: str
    scene_type: str
    location: str | None
    time_of_day: str | None
    speakers: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.region.start,
            "end": self.region.end,
            "heading": self.heading,
            "scene_type": self.scene_type,
            "location": self.location,
            "time_of_day": self.time_of_day,
            "speakers": self.speakers,
        }


@dataclass
class ScriptOutline:
    """Result of one full pass: a category per line and the region list."""

    lines: list[ClassifiedLine]
    regions: list[Region]

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def categories(self) -> list[LineCategory]:
        return [line.category for line in self.lines]

    def category_at(self, index: int) -> LineCategory:
        """Return the category of the 1-based line ``index``."""
        if not 1 <= index <= self.line_count:
            raise IndexError(
                f"Line {index} is out of range (1..{self.line_count})"
            )
        return self.lines[index - 1].category

    def regions_of(self, kind: RegionKind) -> list[Region]:
        """Return the regions of one kind, in emission order."""
        return [region for region in self.regions if region.kind is kind]

    def folding_ranges(self) -> list[tuple[int, int]]:
        """Return ``(start, end)`` pairs for a folding host, in emission order."""
        return [region.as_range() for region in self.regions]

    def scenes(self) -> list[SceneSummary]:
        """Describe each scene region by its heading and the speakers inside it.

        The heading is the line just before the region start.
        """
        summaries = []
        for region in self.regions_of(RegionKind.SCENE):
            heading = self.lines[region.start - 2].text if region.start >= 2 else ""
            scene_type, location, time_of_day = ScreenplayUtils.parse_scene_heading(
                heading.strip()
            )

            speakers: list[str] = []
            for line in self.lines[region.start - 1 : region.end]:
                if line.category is LineCategory.CHARACTER:
                    name = ScreenplayUtils.character_name(line.text)
                    if name not in speakers:
                        speakers.append(name)

            summaries.append(
                SceneSummary(
                    region=region,
                    heading=heading,
                    scene_type=scene_type,
                    location=location,
                    time_of_day=time_of_day,
                    speakers=speakers,
                )
            )
        return summaries

    def to_dict(self) -> dict[str, Any]:
        return {
            "line_count": self.line_count,
            "lines": [
                {
                    "index": line.index,
                    "category": line.category.value,
                    "token": line.category.token,
                    "text": line.text,
                }
                for line in self.lines
            ],
            "regions": [region.to_dict() for region in self.regions],
        }


def parse_text(text: str, drop_empty_regions: bool | None = None) -> ScriptOutline:
    """Classify every line of ``text`` and build its regions.

    Args:
        text: Full buffer content
        drop_empty_regions: Override the ``drop_empty_regions`` setting

    Returns:
        The outline of the buffer
    """
    if drop_empty_regions is None:
        drop_empty_regions = get_settings().drop_empty_regions

    classified = classify_lines(split_lines(text))
    regions = build_regions(classified, drop_empty=drop_empty_regions)
    return ScriptOutline(lines=classified, regions=regions)


class ScriptDocument:
    """Holds the current draft and re-parses it on every change.

    Each change triggers a full, independent parse. Listeners receive the new
    outline after the parse completes, so the latest draft always wins.
    """

    def __init__(
        self,
        text: str = "",
        drop_empty_regions: bool | None = None,
        source: Path | None = None,
    ) -> None:
        """Initialize the document.

        Args:
            text: Initial draft
            drop_empty_regions: Override the ``drop_empty_regions`` setting
            source: File the draft was loaded from, if any
        """
        self.drop_empty_regions = drop_empty_regions
        self.source = source
        self.revision = 0
        self._listeners: list[OutlineListener] = []
        self._draft = text
        self._outline = parse_text(text, drop_empty_regions)

    @classmethod
    def from_file(
        cls, path: Path | str, drop_empty_regions: bool | None = None
    ) -> ScriptDocument:
        """Load a screenplay file into a new document.

        Raises:
            ScriptFoldFileNotFoundError: If ``path`` does not exist
        """
        path = Path(path)
        return cls(
            text=cls._read(path),
            drop_empty_regions=drop_empty_regions,
            source=path,
        )

    @staticmethod
    def _read(path: Path) -> str:
        if not path.is_file():
            raise ScriptFoldFileNotFoundError(
                message=f"Screenplay file not found: {path}",
                hint="Check that the file path is correct",
                details={"path": str(path), "current_dir": str(Path.cwd())},
            )
        return path.read_text(encoding="utf-8")

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def outline(self) -> ScriptOutline:
        return self._outline

    def subscribe(self, listener: OutlineListener) -> Callable[[], None]:
        """Register ``listener`` for new outlines.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_draft(self, text: str) -> ScriptOutline:
        """Replace the draft, re-parse it and notify listeners."""
        outline = parse_text(text, self.drop_empty_regions)
        self._draft = text
        self._outline = outline
        self.revision += 1

        logger.debug(
            "Draft re-parsed",
            revision=self.revision,
            line_count=outline.line_count,
            regions=len(outline.regions),
        )

        for listener in list(self._listeners):
            listener(outline)
        return outline

    def reload(self) -> ScriptOutline:
        """Re-read the source file and re-parse it.

        Raises:
            ScriptFoldFileNotFoundError: If the document has no source file
                or the file is gone
        """
        if self.source is None:
            raise ScriptFoldFileNotFoundError(
                message="Document has no source file to reload",
                hint="Create the document with ScriptDocument.from_file()",
            )
        return self.set_draft(self._read(self.source))
