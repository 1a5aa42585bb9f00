from .base import JsonRepository
from .lego_sets import LegoSetRepository

__all__ = ["JsonRepository", "LegoSetRepository"]
