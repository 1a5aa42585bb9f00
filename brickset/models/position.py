from __future__ import annotations

from enum import Enum
from typing import Union

from brickset.core.errors import InvalidPositionError


class Position(str, Enum):
    """Direction of a piece-count threshold query."""

    UNDER = "under"
    OVER = "over"

    @classmethod
    def parse(cls, value: Union["Position", str]) -> "Position":
        """Case-insensitive parse of ``"under"`` / ``"over"``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                raise InvalidPositionError(value) from None
        raise InvalidPositionError(value)

    def matches(self, pieces: int, threshold: int) -> bool:
        if self is Position.UNDER:
            return pieces < threshold
        return pieces > threshold

    def __str__(self) -> str:
        return self.value

__all__ = ["Position"]
