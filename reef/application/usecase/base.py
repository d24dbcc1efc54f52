"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from reef.domain.error import ValidationFailedError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass

    @staticmethod
    def parse(value_type: type, value: Any, field: str) -> Any:
        """Build a value object from raw input.

        Raises:
            ValidationFailedError: If ``value`` is not a valid ``value_type``
        """
        try:
            return value_type(value)
        except PydanticValidationError as e:
            reason = e.errors()[0]["msg"] if e.errors() else str(e)
            raise ValidationFailedError(f"Invalid {field}: {reason}") from e
