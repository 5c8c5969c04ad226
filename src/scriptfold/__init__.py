"""scriptfold: structural parsing for Fountain screenplays.

scriptfold classifies each line of a screenplay into one of fourteen
categories and groups the classified lines into collapsible scene and
dialogue block regions that an editor can fold.
"""

from .config import ScriptFoldSettings, get_logger, get_settings
from .exceptions import InvalidInputSequenceError, ScriptFoldError
from .parser import (
    ClassifiedLine,
    Line,
    LineCategory,
    Region,
    RegionKind,
    ScriptDocument,
    ScriptOutline,
    build_regions,
    classify,
    classify_lines,
    parse_text,
    split_lines,
)

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "ClassifiedLine",
    "InvalidInputSequenceError",
    "Line",
    "LineCategory",
    "Region",
    "RegionKind",
    "ScriptDocument",
    "ScriptFoldError",
    "ScriptFoldSettings",
    "ScriptOutline",
    "__version__",
    "build_regions",
    "classify",
    "classify_lines",
    "get_logger",
    "get_settings",
    "parse_text",
    "split_lines",
]
