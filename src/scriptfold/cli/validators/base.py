"""Base validator classes for CLI input."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from scriptfold.exceptions import ValidationError

T = TypeVar("T")


class Validator(ABC, Generic[T]):
    """Base class for input validators."""

    @abstractmethod
    def validate(self, value: Any) -> T:
        """Validate input value.

        Args:
            value: Value to validate

        Returns:
            Validated value, possibly transformed

        Raises:
            ValidationError: If validation fails
        """
        pass

    def validate_required(self, value: Any, field_name: str) -> Any:
        """Validate that a value is not None or empty."""
        if value is None:
            raise ValidationError(
                message=f"{field_name} is required", details={"field": field_name}
            )
        if isinstance(value, str) and not value.strip():
            raise ValidationError(
                message=f"{field_name} cannot be empty", details={"field": field_name}
            )
        return value
