"""Tests for whole-buffer parsing and the draft holder."""

import pytest

from scriptfold.config import ScriptFoldSettings, set_settings
from scriptfold.exceptions import ScriptFoldFileNotFoundError
from scriptfold.parser import (
    Line,
    LineCategory,
    Region,
    RegionKind,
    ScriptDocument,
    parse_text,
    split_lines,
)


class TestSplitLines:
    """Tests for buffer splitting."""

    def test_basic(self):
        assert split_lines("a\nb") == [Line(1, "a"), Line(2, "b")]

    def test_empty_buffer_is_one_line(self):
        assert split_lines("") == [Line(1, "")]

    def test_trailing_newline_adds_empty_line(self):
        assert split_lines("a\n") == [Line(1, "a"), Line(2, "")]

    def test_carriage_returns_are_dropped(self):
        assert split_lines("a\r\nb\r\n") == [Line(1, "a"), Line(2, "b"), Line(3, "")]

    def test_whitespace_is_kept(self):
        assert split_lines("  (beat)  ")[0].text == "  (beat)  "


class TestParseText:
    """Tests for parse_text and the outline it returns."""

    def test_sample_script(self, sample_script):
        outline = parse_text(sample_script)

        assert outline.line_count == 12
        assert outline.regions == [
            Region(5, 6, RegionKind.DIALOGUE_BLOCK),
            Region(8, 9, RegionKind.DIALOGUE_BLOCK),
            Region(2, 10, RegionKind.SCENE),
            Region(11, 12, RegionKind.SCENE),
        ]

    def test_short_scene(self):
        outline = parse_text("INT. HOUSE - DAY\nJohn enters.\n\nJOHN\nHello.\n")

        assert outline.categories == [
            LineCategory.SCENE_HEADING,
            LineCategory.ACTION,
            LineCategory.BLANK,
            LineCategory.CHARACTER,
            LineCategory.ACTION,
            LineCategory.BLANK,
        ]
        assert outline.regions == [
            Region(5, 6, RegionKind.DIALOGUE_BLOCK),
            Region(2, 6, RegionKind.SCENE),
        ]

    def test_categories(self, sample_script):
        outline = parse_text(sample_script)
        assert outline.categories[:5] == [
            LineCategory.SCENE_HEADING,
            LineCategory.ACTION,
            LineCategory.BLANK,
            LineCategory.CHARACTER,
            LineCategory.DIALOGUE,
        ]
        assert outline.category_at(7) is LineCategory.CHARACTER

    def test_category_at_out_of_range(self, sample_script):
        outline = parse_text(sample_script)
        with pytest.raises(IndexError):
            outline.category_at(0)
        with pytest.raises(IndexError):
            outline.category_at(13)

    def test_regions_of(self, sample_script):
        outline = parse_text(sample_script)
        scenes = outline.regions_of(RegionKind.SCENE)
        assert [region.as_range() for region in scenes] == [(2, 10), (11, 12)]

    def test_folding_ranges(self, sample_script):
        assert parse_text(sample_script).folding_ranges() == [
            (5, 6),
            (8, 9),
            (2, 10),
            (11, 12),
        ]

    def test_scenes(self, sample_script):
        house, garden = parse_text(sample_script).scenes()

        assert house.heading == "INT. HOUSE - DAY"
        assert house.scene_type == "INT"
        assert house.location == "HOUSE"
        assert house.time_of_day == "DAY"
        assert house.speakers == ["JOHN", "MARY"]

        assert garden.scene_type == "EXT"
        assert garden.location == "GARDEN"
        assert garden.time_of_day == "NIGHT"
        assert garden.speakers == []

    def test_to_dict(self):
        data = parse_text("INT. HOUSE\nRain.").to_dict()
        assert data["line_count"] == 2
        assert data["lines"][0] == {
            "index": 1,
            "category": "scene_heading",
            "token": "sceneHeading",
            "text": "INT. HOUSE",
        }
        assert data["regions"] == []

    def test_empty_text(self):
        outline = parse_text("")
        assert outline.categories == [LineCategory.BLANK]
        assert outline.regions == []

    def test_drop_empty_override(self):
        outline = parse_text("INT. A\nEXT. B", drop_empty_regions=False)
        assert outline.folding_ranges() == [(2, 2), (3, 2)]
        assert parse_text("INT. A\nEXT. B").regions == []

    def test_drop_empty_from_settings(self):
        set_settings(ScriptFoldSettings(drop_empty_regions=False))
        assert len(parse_text("INT. A\nEXT. B").regions) == 2


class TestScriptDocument:
    """Tests for the draft holder."""

    def test_initial_parse(self, sample_script):
        document = ScriptDocument(sample_script)
        assert document.revision == 0
        assert document.draft == sample_script
        assert len(document.outline.regions) == 4

    def test_set_draft_reparses(self):
        document = ScriptDocument("INT. HOUSE\nRain.")
        outline = document.set_draft("EXT. GARDEN\nWind.\nLeaves.")

        assert document.revision == 1
        assert document.outline is outline
        assert outline.regions == [Region(2, 3, RegionKind.SCENE)]

    def test_listeners_receive_latest_outline(self):
        document = ScriptDocument()
        received = []
        document.subscribe(received.append)

        document.set_draft("INT. A\nx")
        document.set_draft("INT. A\nx\ny")

        assert len(received) == 2
        assert received[-1] is document.outline
        assert received[-1].line_count == 3

    def test_unsubscribe(self):
        document = ScriptDocument()
        received = []
        unsubscribe = document.subscribe(received.append)

        unsubscribe()
        unsubscribe()
        document.set_draft("INT. A\nx")

        assert received == []

    def test_from_file(self, fountain_file):
        document = ScriptDocument.from_file(fountain_file)
        assert document.source == fountain_file
        assert document.outline.line_count == 12

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(ScriptFoldFileNotFoundError) as exc_info:
            ScriptDocument.from_file(tmp_path / "missing.fountain")
        assert "missing.fountain" in exc_info.value.message
        assert exc_info.value.hint

    def test_reload(self, fountain_file):
        document = ScriptDocument.from_file(fountain_file)
        fountain_file.write_text("INT. NEW\nOne.\nTwo.\n", encoding="utf-8")

        outline = document.reload()

        assert document.revision == 1
        assert outline.regions == [Region(2, 4, RegionKind.SCENE)]

    def test_reload_without_source(self):
        with pytest.raises(ScriptFoldFileNotFoundError):
            ScriptDocument("INT. A").reload()
