"""Screenplay-specific utility functions."""

from __future__ import annotations

import re


class ScreenplayUtils:
    """Helpers that turn heading and cue lines into outline labels."""

    # Longest prefix first so INT./EXT. is not read as INT.
    SCENE_PREFIXES: tuple[tuple[str, str], ...] = (
        ("INT./EXT.", "INT/EXT"),
        ("I/E.", "INT/EXT"),
        ("INT.", "INT"),
        ("INT ", "INT"),
        ("EXT.", "EXT"),
        ("EXT ", "EXT"),
        ("EST.", "EST"),
        ("EST ", "EST"),
    )

    TIME_INDICATORS: tuple[str, ...] = (
        "MOMENTS LATER",
        "DAY",
        "NIGHT",
        "MORNING",
        "AFTERNOON",
        "EVENING",
        "DAWN",
        "DUSK",
        "CONTINUOUS",
        "LATER",
        "SUNSET",
        "SUNRISE",
        "NOON",
    )

    CUE_EXTENSION = re.compile(r"\s*\(.*\)\s*$")

    @staticmethod
    def split_prefix(heading: str) -> tuple[str, str]:
        """Split a heading into its scene type and the rest.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Tuple of (scene_type, remainder); scene_type is "" if unknown
        """
        heading_upper = heading.upper()
        for prefix, scene_type in ScreenplayUtils.SCENE_PREFIXES:
            if heading_upper.startswith(prefix):
                return scene_type, heading[len(prefix) :].strip()
        return "", heading.strip()

    @staticmethod
    def extract_location(heading: str) -> str | None:
        """Extract location from scene heading.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Extracted location or None
        """
        if not heading:
            return None

        _, rest = ScreenplayUtils.split_prefix(heading)

        if " - " in rest:
            location, _ = rest.rsplit(" - ", 1)
            location = location.strip()
            return location if location else None

        # Time only, no location
        if rest.startswith("- "):
            return None

        return rest if rest else None

    @staticmethod
    def extract_time(heading: str) -> str | None:
        """Extract time of day from scene heading.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Extracted time or None
        """
        if not heading or " - " not in heading:
            return None

        last_part = heading.upper().rsplit(" - ", 1)[-1]
        if re.search(r"\bMIDNIGHT\b", last_part):
            return "NIGHT"

        for indicator in ScreenplayUtils.TIME_INDICATORS:
            if re.search(rf"\b{re.escape(indicator)}\b", last_part):
                return indicator

        return None

    @staticmethod
    def parse_scene_heading(heading: str) -> tuple[str, str | None, str | None]:
        """Parse a scene heading into its components.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Tuple of (scene_type, location, time_of_day)
        """
        if not heading:
            return "", None, None

        scene_type, _ = ScreenplayUtils.split_prefix(heading)
        return (
            scene_type,
            ScreenplayUtils.extract_location(heading),
            ScreenplayUtils.extract_time(heading),
        )

    @staticmethod
    def character_name(cue: str) -> str:
        """Return the speaker name of a character cue without its extension.

        "JOHN (V.O.)" becomes "JOHN".
        """
        return ScreenplayUtils.CUE_EXTENSION.sub("", cue).strip()
