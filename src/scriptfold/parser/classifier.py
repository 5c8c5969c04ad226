"""Line classifier for Fountain-style screenplay markup.

Each line is matched against an ordered rule table and the first rule that
matches decides its category. Rules deliberately overlap: an all-caps line
starting with ``INT`` is a scene heading and never a character cue, because
the scene heading rule comes first. Classification never looks at
neighbouring lines.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from scriptfold.parser.models import ClassifiedLine, Line, LineCategory


@dataclass(frozen=True)
class ClassificationRule:
    """A single ``pattern -> category`` rule.

    ``strip`` makes the rule match against the trimmed line instead of the
    raw one.
    """

    name: str
    pattern: re.Pattern[str]
    category: LineCategory
    strip: bool = False

    def matches(self, line: str) -> bool:
        subject = line.strip() if self.strip else line
        return self.pattern.match(subject) is not None


class LineClassifier:
    """Classify screenplay lines with an ordered, first-match-wins rule table."""

    # Order is part of the contract
    RULES: tuple[ClassificationRule, ...] = (
        ClassificationRule("comment", re.compile(r"#"), LineCategory.COMMENT),
        ClassificationRule(
            "scene_heading",
            re.compile(r"(INT|EXT|EST|INT\./EXT\.)", re.IGNORECASE),
            LineCategory.SCENE_HEADING,
        ),
        ClassificationRule(
            "character",
            re.compile(r"[A-Z][A-Z0-9\s]*(\(.*\))?\Z"),
            LineCategory.CHARACTER,
        ),
        ClassificationRule(
            "parenthetical",
            re.compile(r"\(.*\)\Z"),
            LineCategory.PARENTHETICAL,
            strip=True,
        ),
        ClassificationRule("transition", re.compile(r">"), LineCategory.TRANSITION),
        ClassificationRule("note", re.compile(r"\[\[.*\]\]\Z"), LineCategory.NOTE),
        ClassificationRule(
            "page_break", re.compile(r"==="), LineCategory.PAGE_BREAK
        ),
        ClassificationRule(
            "synopsis_separator", re.compile(r"="), LineCategory.SYNOPSIS_SEPARATOR
        ),
        ClassificationRule(
            "scene_number", re.compile(r"\."), LineCategory.SCENE_NUMBER
        ),
        ClassificationRule("emphasis", re.compile(r"\*"), LineCategory.EMPHASIS),
        ClassificationRule(
            "underline", re.compile(r"_.*_\Z"), LineCategory.UNDERLINE
        ),
        ClassificationRule("blank", re.compile(r"\s*\Z"), LineCategory.BLANK),
        ClassificationRule(
            "dialogue", re.compile(r"[^A-Z]+\Z"), LineCategory.DIALOGUE
        ),
    )

    # Used when no rule matches
    FALLBACK = LineCategory.ACTION

    def __init__(self, rules: Iterable[ClassificationRule] | None = None) -> None:
        """Initialize the classifier.

        Args:
            rules: Optional replacement rule table, evaluated in the given order
        """
        self.rules = tuple(rules) if rules is not None else self.RULES

    def classify(self, line: str) -> LineCategory:
        """Return the category of ``line``.

        Args:
            line: Raw line text without its trailing newline

        Returns:
            The category of the first matching rule, or ACTION
        """
        for rule in self.rules:
            if rule.matches(line):
                return rule.category
        return self.FALLBACK

    def classify_lines(self, lines: Iterable[Line]) -> list[ClassifiedLine]:
        """Classify a sequence of lines, keeping their indices and text."""
        return [
            ClassifiedLine(
                index=line.index, category=self.classify(line.text), text=line.text
            )
            for line in lines
        ]


_default_classifier = LineClassifier()


def classify(line: str) -> LineCategory:
    """Classify a single line with the default rule table."""
    return _default_classifier.classify(line)


def classify_lines(lines: Iterable[Line]) -> list[ClassifiedLine]:
    """Classify a sequence of lines with the default rule table."""
    return _default_classifier.classify_lines(lines)
