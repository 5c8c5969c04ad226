"""Input validators for scriptfold CLI."""

from scriptfold.cli.validators.base import Validator
from scriptfold.cli.validators.file_validator import DirectoryValidator, FileValidator

__all__ = ["DirectoryValidator", "FileValidator", "Validator"]
