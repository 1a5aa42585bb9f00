"""Brickset query layer.

Loads the static LEGO-set dataset once and answers simple counting,
filtering and grouping questions over it:

	from brickset import LegoSetRepository
	repo = LegoSetRepository()
	repo.count_by_tag("Microscale")
"""

from .core.errors import BricksetError, InvalidPositionError, RepositoryLoadError
from .models.position import Position
from .repository.lego_sets import LegoSetRepository
from .schemas.lego_set import Dimensions, LegoSet, PackagingType

__version__ = "0.1.0"

__all__ = [
    "BricksetError",
    "InvalidPositionError",
    "RepositoryLoadError",
    "Position",
    "LegoSetRepository",
    "Dimensions",
    "LegoSet",
    "PackagingType",
    "__version__",
]
