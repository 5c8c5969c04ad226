"""Fountain line classification and region building for scriptfold."""

from __future__ import annotations

from .classifier import ClassificationRule, LineClassifier, classify, classify_lines
from .document import (
    SceneSummary,
    ScriptDocument,
    ScriptOutline,
    parse_text,
    split_lines,
)
from .models import ClassifiedLine, Line, LineCategory, Region, RegionKind
from .regions import RegionBuilder, build_regions

__all__ = [
    "ClassificationRule",
    "ClassifiedLine",
    "Line",
    "LineCategory",
    "LineClassifier",
    "Region",
    "RegionBuilder",
    "RegionKind",
    "SceneSummary",
    "ScriptDocument",
    "ScriptOutline",
    "build_regions",
    "classify",
    "classify_lines",
    "parse_text",
    "split_lines",
]
