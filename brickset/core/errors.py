from __future__ import annotations

from pathlib import Path
from typing import Any, Optional


class BricksetError(Exception):
    """Base class for errors raised by the brickset package."""


class RepositoryLoadError(BricksetError):
    """The dataset could not be read or did not match the record schema."""

    def __init__(self, message: str, source: Optional[Path] = None) -> None:
        self.source = source
        if source is not None:
            message = f"{message} ({source})"
        super().__init__(message)


class InvalidPositionError(BricksetError, ValueError):
    """A piece-count direction selector other than under/over."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"invalid position {value!r}: expected 'under' or 'over'")


__all__ = ["BricksetError", "RepositoryLoadError", "InvalidPositionError"]
