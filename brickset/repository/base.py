"""Read-only repository over a JSON array resource.

The whole file is parsed once at construction into a tuple of pydantic
models; afterwards the collection never changes. Subclasses set ``model``.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, ClassVar, Generic, Iterable, Iterator, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from brickset.core.errors import RepositoryLoadError
from brickset.core.logging import get_logger
from brickset.core.paths import resolve_data_file

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


class JsonRepository(Generic[T]):
    """Loads ``source`` (a JSON array) into ``model`` instances."""

    model: ClassVar[Type[BaseModel]]

    def __init__(self, source: Optional[Union[str, Path]] = None) -> None:
        self._source: Optional[Path] = resolve_data_file(source)
        self._items: Tuple[T, ...] = self._validate_all(self._read(self._source), self._source)
        logger.info("Loaded %d %s record(s) from %s", len(self._items), self.model.__name__, self._source)

    @classmethod
    def from_records(cls, records: Iterable[Any]):
        """Build a repository from in-memory mappings or model instances."""
        repo = cls.__new__(cls)
        repo._source = None
        repo._items = repo._validate_all(records, None)
        return repo

    @staticmethod
    def _read(path: Path) -> list:
        if not path.is_file():
            raise RepositoryLoadError("dataset not found", path)
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise RepositoryLoadError(f"cannot read dataset: {e}", path) from e
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise RepositoryLoadError(f"invalid JSON at line {e.lineno} column {e.colno}", path) from e
        if not isinstance(raw, list):
            raise RepositoryLoadError(
                f"expected a JSON array of records, got {type(raw).__name__}", path
            )
        return raw

    def _validate_all(self, raw: Iterable[Any], source: Optional[Path]) -> Tuple[T, ...]:
        model = self.model
        items = []
        for index, obj in enumerate(raw):
            if isinstance(obj, model):
                items.append(obj)
                continue
            try:
                items.append(model.model_validate(obj))
            except ValidationError as e:
                raise RepositoryLoadError(
                    f"record #{index} is not a valid {model.__name__}: {e.error_count()} error(s)",
                    source,
                ) from e
        return tuple(items)  # type: ignore[return-value]

    @property
    def source(self) -> Optional[Path]:
        return self._source

    def get_all(self) -> Tuple[T, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


__all__ = ["JsonRepository"]
