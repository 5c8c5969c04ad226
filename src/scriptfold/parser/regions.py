"""Region builder: group classified lines into scenes and dialogue blocks.

A single forward scan keeps two independent markers, one for the open scene
and one for the open dialogue block:

- a scene heading closes the open scene and opens a new one.
- a character cue closes the open dialogue block and opens a new one.
- a blank line closes the open dialogue block and leaves it closed.

Every other category is interior to whatever region is open, comments
included. Regions are emitted in the order they close. Regions still open at
the end of input close at ``line_count`` (not ``line_count + 1`` as a
mid-scan close would).
"""

from __future__ import annotations

from collections.abc import Iterable

from scriptfold.config import get_logger
from scriptfold.exceptions import InvalidInputSequenceError
from scriptfold.parser.models import (
    ClassifiedLine,
    LineCategory,
    Region,
    RegionKind,
)

logger = get_logger(__name__)


class RegionBuilder:
    """Build folding regions from a classified line sequence."""

    def __init__(self, drop_empty: bool = True) -> None:
        """Initialize the builder.

        Args:
            drop_empty: Drop regions whose start is not before their end
        """
        self.drop_empty = drop_empty

    def build(self, lines: Iterable[ClassifiedLine]) -> list[Region]:
        """Scan ``lines`` once and return the regions in closing order.

        Args:
            lines: Classified lines with indices 1, 2, ..., n

        Returns:
            Emitted regions, possibly empty

        Raises:
            InvalidInputSequenceError: If indices do not run 1, 2, ..., n
        """
        regions: list[Region] = []
        # Line index of the open heading or cue, None while closed
        scene_open: int | None = None
        dialogue_open: int | None = None
        line_count = 0

        for position, line in enumerate(lines):
            expected = position + 1
            if line.index != expected:
                raise InvalidInputSequenceError(
                    f"Line index {line.index} at position {position} "
                    f"breaks the sequence (expected {expected})",
                    position=position,
                    expected_index=expected,
                    actual_index=line.index,
                )
            line_count = line.index
            index = line.index

            if line.category is LineCategory.SCENE_HEADING:
                if scene_open is not None:
                    self._emit(regions, scene_open + 1, index, RegionKind.SCENE)
                scene_open = index
            elif line.category is LineCategory.CHARACTER:
                if dialogue_open is not None:
                    self._emit(
                        regions,
                        dialogue_open + 1,
                        index,
                        RegionKind.DIALOGUE_BLOCK,
                    )
                dialogue_open = index
            elif line.category is LineCategory.BLANK:
                if dialogue_open is not None:
                    self._emit(
                        regions,
                        dialogue_open + 1,
                        index,
                        RegionKind.DIALOGUE_BLOCK,
                    )
                    dialogue_open = None

        if scene_open is not None:
            self._emit(regions, scene_open + 1, line_count, RegionKind.SCENE)
        if dialogue_open is not None:
            self._emit(
                regions,
                dialogue_open + 1,
                line_count,
                RegionKind.DIALOGUE_BLOCK,
            )

        logger.debug(
            "Built regions",
            line_count=line_count,
            regions=len(regions),
            drop_empty=self.drop_empty,
        )
        return regions

    def _emit(
        self, regions: list[Region], start: int, end: int, kind: RegionKind
    ) -> None:
        if self.drop_empty and start >= end:
            return
        regions.append(Region(start=start, end=end, kind=kind))


def build_regions(
    lines: Iterable[ClassifiedLine], drop_empty: bool = True
) -> list[Region]:
    """Build regions from classified lines.

    Args:
        lines: Classified lines with indices 1, 2, ..., n
        drop_empty: Drop regions whose start is not before their end

    Returns:
        Regions in the order they were closed
    """
    return RegionBuilder(drop_empty=drop_empty).build(lines)
