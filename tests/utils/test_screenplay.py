"""Tests for screenplay utilities."""

import pytest

from scriptfold.utils import ScreenplayUtils


class TestSplitPrefix:
    """Tests for scene type detection."""

    @pytest.mark.parametrize(
        ("heading", "expected"),
        [
            ("INT. COFFEE SHOP - DAY", ("INT", "COFFEE SHOP - DAY")),
            ("EXT. PARK - NIGHT", ("EXT", "PARK - NIGHT")),
            ("INT./EXT. CAR - MOVING", ("INT/EXT", "CAR - MOVING")),
            ("I/E. CAR - DAY", ("INT/EXT", "CAR - DAY")),
            ("EST. CITY", ("EST", "CITY")),
            ("int. kitchen - day", ("INT", "kitchen - day")),
            ("INT KITCHEN", ("INT", "KITCHEN")),
            ("SOMEWHERE", ("", "SOMEWHERE")),
        ],
    )
    def test_split_prefix(self, heading, expected):
        assert ScreenplayUtils.split_prefix(heading) == expected


class TestExtractLocation:
    """Tests for location extraction."""

    def test_standard(self):
        assert ScreenplayUtils.extract_location("INT. COFFEE SHOP - DAY") == (
            "COFFEE SHOP"
        )

    def test_dash_inside_location(self):
        heading = "EXT. HIGHWAY - NORTH EXIT - NIGHT"
        assert ScreenplayUtils.extract_location(heading) == "HIGHWAY - NORTH EXIT"

    def test_no_time(self):
        assert ScreenplayUtils.extract_location("INT. GARAGE") == "GARAGE"

    def test_time_only(self):
        assert ScreenplayUtils.extract_location("INT. - DAY") is None

    def test_empty(self):
        assert ScreenplayUtils.extract_location("") is None
        assert ScreenplayUtils.extract_location("INT.") is None


class TestExtractTime:
    """Tests for time of day extraction."""

    @pytest.mark.parametrize(
        ("heading", "expected"),
        [
            ("INT. HOUSE - DAY", "DAY"),
            ("EXT. PARK - night", "NIGHT"),
            ("INT. HOUSE - MOMENTS LATER", "MOMENTS LATER"),
            ("INT. HOUSE - LATER", "LATER"),
            ("INT. HOUSE - MIDNIGHT", "NIGHT"),
            ("INT. HOUSE - CONTINUOUS", "CONTINUOUS"),
            ("INT. HOUSE - FLASHBACK", None),
            ("INT. HOUSE", None),
            ("", None),
        ],
    )
    def test_extract_time(self, heading, expected):
        assert ScreenplayUtils.extract_time(heading) == expected


class TestParseSceneHeading:
    """Tests for full heading parsing."""

    def test_full_heading(self):
        assert ScreenplayUtils.parse_scene_heading("EXT. BEACH - DAWN") == (
            "EXT",
            "BEACH",
            "DAWN",
        )

    def test_empty_heading(self):
        assert ScreenplayUtils.parse_scene_heading("") == ("", None, None)

    def test_unknown_prefix(self):
        assert ScreenplayUtils.parse_scene_heading("Internal memo") == (
            "",
            "Internal memo",
            None,
        )


class TestCharacterName:
    """Tests for cue name extraction."""

    @pytest.mark.parametrize(
        ("cue", "expected"),
        [
            ("JOHN", "JOHN"),
            ("JOHN (V.O.)", "JOHN"),
            ("MARY (CONT'D)  ", "MARY"),
            ("  GUARD 2", "GUARD 2"),
        ],
    )
    def test_character_name(self, cue, expected):
        assert ScreenplayUtils.character_name(cue) == expected
