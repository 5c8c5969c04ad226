"""Tests for the line classifier."""

import re

import pytest

from scriptfold.parser import (
    ClassificationRule,
    Line,
    LineCategory,
    LineClassifier,
    classify,
    classify_lines,
)


class TestRules:
    """One test group per rule of the table."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("# act one", LineCategory.COMMENT),
            ("#INT. HOUSE - DAY", LineCategory.COMMENT),
            ("INT. HOUSE - DAY", LineCategory.SCENE_HEADING),
            ("EXT. BEACH - NIGHT", LineCategory.SCENE_HEADING),
            ("EST. CITY SKYLINE", LineCategory.SCENE_HEADING),
            ("INT./EXT. CAR - MOVING", LineCategory.SCENE_HEADING),
            ("ext. beach - night", LineCategory.SCENE_HEADING),
            ("JOHN", LineCategory.CHARACTER),
            ("MARY (V.O.)", LineCategory.CHARACTER),
            ("GUARD 2", LineCategory.CHARACTER),
            ("(beat)", LineCategory.PARENTHETICAL),
            ("  (quietly)  ", LineCategory.PARENTHETICAL),
            ("> CUT TO:", LineCategory.TRANSITION),
            ("[[check the timeline]]", LineCategory.NOTE),
            ("===", LineCategory.PAGE_BREAK),
            ("=== page two", LineCategory.PAGE_BREAK),
            ("= John learns the truth", LineCategory.SYNOPSIS_SEPARATOR),
            ("==", LineCategory.SYNOPSIS_SEPARATOR),
            (".OPENING SHOT", LineCategory.SCENE_NUMBER),
            ("*slams the door*", LineCategory.EMPHASIS),
            ("_Underlined words_", LineCategory.UNDERLINE),
            ("", LineCategory.BLANK),
            ("   \t", LineCategory.BLANK),
            ("hello there.", LineCategory.DIALOGUE),
            ("1999", LineCategory.DIALOGUE),
            ("John walks in.", LineCategory.ACTION),
        ],
    )
    def test_classify(self, line, expected):
        """Each line lands in the category of the first rule it matches."""
        assert classify(line) is expected


class TestRuleOrder:
    """Overlapping rules are resolved by their order."""

    def test_scene_heading_beats_character(self):
        """An all-caps INT line is a scene heading, not a cue."""
        assert classify("INT HOUSE") is LineCategory.SCENE_HEADING
        assert classify("EXTRA") is LineCategory.SCENE_HEADING

    def test_scene_heading_prefix_is_case_insensitive(self):
        """The prefix check ignores case, even in ordinary words."""
        assert classify("Internal memo arrives.") is LineCategory.SCENE_HEADING

    def test_comment_beats_everything(self):
        """A leading hash wins over any other pattern."""
        assert classify("#JOHN") is LineCategory.COMMENT
        assert classify("#") is LineCategory.COMMENT

    def test_character_beats_parenthetical(self):
        """A cue with an extension stays a cue."""
        assert classify("JOHN (CONT'D)") is LineCategory.CHARACTER

    def test_page_break_beats_synopsis(self):
        """Three equals signs are a page break, fewer are a synopsis."""
        assert classify("====") is LineCategory.PAGE_BREAK
        assert classify("=") is LineCategory.SYNOPSIS_SEPARATOR

    def test_note_must_span_whole_line(self):
        """Text after the closing brackets stops the note rule."""
        assert classify("[[note]] and more") is LineCategory.DIALOGUE
        assert classify("[[Note]] And More") is LineCategory.ACTION

    def test_single_underscore_is_not_underline(self):
        """Underline needs an opening and a closing underscore."""
        assert classify("_") is LineCategory.DIALOGUE
        assert classify("_Open") is LineCategory.ACTION

    def test_uppercase_punctuation_is_action(self):
        """Cues only allow letters, digits and whitespace."""
        assert classify("CUT TO:") is LineCategory.ACTION
        assert classify("JOHN'S CAR") is LineCategory.ACTION

    def test_capitalised_dialogue_is_action(self):
        """Classification is local: a capital letter makes a line action."""
        assert classify("Hello.") is LineCategory.ACTION
        assert classify("hello.") is LineCategory.DIALOGUE

    def test_leading_whitespace_blocks_prefix_rules(self):
        """Prefix rules look at the untrimmed line."""
        assert classify("  INT. HOUSE") is LineCategory.ACTION
        assert classify("  JOHN") is LineCategory.ACTION


class TestLineCategory:
    """The category set is a contract with the highlighting layer."""

    def test_fourteen_categories(self):
        assert len(LineCategory) == 14

    def test_tokens_are_unique(self):
        tokens = {category.token for category in LineCategory}
        assert len(tokens) == 14

    def test_token_names(self):
        assert LineCategory.SCENE_HEADING.token == "sceneHeading"
        assert LineCategory.BLANK.token == "emptyLine"
        assert LineCategory.SYNOPSIS_SEPARATOR.token == "synopsisSeparator"


class TestLineClassifier:
    """Tests for the classifier object."""

    def test_default_rules_cover_all_but_fallback(self):
        """Every category except ACTION has exactly one rule."""
        categories = [rule.category for rule in LineClassifier.RULES]
        assert len(categories) == 13
        assert set(categories) == set(LineCategory) - {LineCategory.ACTION}
        assert LineClassifier.FALLBACK is LineCategory.ACTION

    def test_custom_rule_table(self):
        """A replacement table is evaluated in the order given."""
        classifier = LineClassifier(
            rules=[
                ClassificationRule(
                    "shouting", re.compile(r"[A-Z ]+!\Z"), LineCategory.EMPHASIS
                )
            ]
        )
        assert classifier.classify("STOP!") is LineCategory.EMPHASIS
        assert classifier.classify("INT. HOUSE") is LineCategory.ACTION

    def test_classify_lines_keeps_index_and_text(self):
        lines = [Line(1, "INT. HOUSE - DAY"), Line(2, ""), Line(3, "JOHN")]
        classified = classify_lines(lines)
        assert [c.index for c in classified] == [1, 2, 3]
        assert [c.text for c in classified] == ["INT. HOUSE - DAY", "", "JOHN"]
        assert [c.category for c in classified] == [
            LineCategory.SCENE_HEADING,
            LineCategory.BLANK,
            LineCategory.CHARACTER,
        ]
