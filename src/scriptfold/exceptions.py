"""Custom exception hierarchy for scriptfold with helpful error messages."""

from __future__ import annotations

from typing import Any


class ScriptFoldError(Exception):
    """Base exception with helpful formatting for all scriptfold errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ConfigurationError(ScriptFoldError):
    """Configuration errors including invalid settings and missing config files."""

    pass


class InvalidInputSequenceError(ScriptFoldError):
    """Classified line sequence with non-monotonic or non-contiguous indices."""

    def __init__(
        self,
        message: str,
        position: int | None = None,
        expected_index: int | None = None,
        actual_index: int | None = None,
    ) -> None:
        """Initialize sequence error.

        Args:
            message: Error message
            position: Zero-based position in the sequence where the check failed
            expected_index: Line index the builder expected at that position
            actual_index: Line index actually found
        """
        self.position = position
        self.expected_index = expected_index
        self.actual_index = actual_index

        details: dict[str, Any] = {}
        if position is not None:
            details["position"] = position
        if expected_index is not None:
            details["expected_index"] = expected_index
        if actual_index is not None:
            details["actual_index"] = actual_index

        super().__init__(
            message=message,
            hint="Line indices must start at 1 and increase by exactly 1",
            details=details or None,
        )


class ScriptFoldFileNotFoundError(ScriptFoldError):
    """File not found errors with helpful path information."""

    pass


class ValidationError(ScriptFoldError):
    """Input validation errors with details about what was expected."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "level": "log_level",
        "format": "log_format",
        "drop_empty": "drop_empty_regions",
        "extensions": "fountain_extensions",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
