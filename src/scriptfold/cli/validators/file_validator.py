"""File and path validators for CLI input."""

from __future__ import annotations

from pathlib import Path

from scriptfold.cli.validators.base import Validator
from scriptfold.exceptions import ValidationError


class FileValidator(Validator[Path]):
    """Validator for screenplay file paths."""

    def __init__(self, must_exist: bool = True) -> None:
        """Initialize file validator.

        Args:
            must_exist: Whether file must exist
        """
        self.must_exist = must_exist

    def validate(self, value: str | Path) -> Path:
        """Validate file path.

        Args:
            value: File path to validate

        Returns:
            Validated, resolved Path object

        Raises:
            ValidationError: If validation fails
        """
        self.validate_required(value, "path")
        path = Path(value).expanduser().resolve()

        if self.must_exist and not path.exists():
            raise ValidationError(
                message=f"File does not exist: {path}",
                hint="Check that the file path is correct",
            )

        if path.exists() and not path.is_file():
            raise ValidationError(message=f"Path is not a file: {path}")

        return path


class DirectoryValidator(Validator[Path]):
    """Validator for directories to watch."""

    def validate(self, value: str | Path) -> Path:
        """Validate directory path.

        Raises:
            ValidationError: If the path is missing or not a directory
        """
        self.validate_required(value, "path")
        path = Path(value).expanduser().resolve()

        if not path.exists():
            raise ValidationError(message=f"Directory does not exist: {path}")
        if not path.is_dir():
            raise ValidationError(message=f"Path is not a directory: {path}")

        return path
