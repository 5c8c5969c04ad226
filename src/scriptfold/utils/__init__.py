"""Utility modules for scriptfold."""

from scriptfold.utils.screenplay import ScreenplayUtils

__all__ = ["ScreenplayUtils"]
