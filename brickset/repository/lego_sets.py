"""Queries over the LEGO-set dataset.

Every query is a single pass over the loaded records and has no side effects.
Missing optional data (tags, dimensions, packaging type, theme) never raises;
such records simply do not contribute to the answer.
"""
from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional, Union

from brickset.core.logging import get_logger
from brickset.models.position import Position
from brickset.repository.base import JsonRepository
from brickset.schemas.lego_set import LegoSet

logger = get_logger(__name__)


class LegoSetRepository(JsonRepository[LegoSet]):
    """Repository of :class:`LegoSet` records loaded from ``brickset.json``."""

    model = LegoSet

    def count_by_tag(self, tag: str) -> int:
        """Number of sets whose tags contain ``tag`` (exact, case-sensitive)."""
        return sum(1 for s in self.get_all() if s.tags and tag in s.tags)

    def count_by_piece_count(self, position: Union[Position, str], pieces: int) -> int:
        """Number of sets with strictly fewer (under) or more (over) than ``pieces``.

        ``position`` may be given as text; anything other than under/over raises
        :class:`~brickset.core.errors.InvalidPositionError`.
        """
        position = Position.parse(position)
        count = sum(1 for s in self.get_all() if position.matches(s.pieces, pieces))
        logger.debug("%d set(s) %s %d pieces", count, position, pieces)
        return count

    def filter_by_theme(self, theme: str) -> List[LegoSet]:
        """Sets whose theme equals ``theme``, in dataset order."""
        return [s for s in self.get_all() if s.theme is not None and s.theme == theme]

    def max_tag_count(self) -> Optional[int]:
        """Largest number of tags on a single set; None if there are no sets."""
        return max((s.tag_count for s in self.get_all()), default=None)

    def largest_volume_name(self) -> Optional[str]:
        """Name of the set with the biggest width*height*depth.

        Sets without all three dimensions are skipped. On a tie the first set
        wins. Returns None when no set has complete dimensions, or when the
        winning set has no name.
        """
        measured = [s for s in self.get_all() if s.volume is not None]
        if not measured:
            return None
        return max(measured, key=lambda s: s.volume).name

    def count_by_packaging_type(self) -> Dict[str, int]:
        """Packaging label -> number of sets; sets without packaging are left out."""
        counts = Counter(
            s.packaging_type.label for s in self.get_all() if s.packaging_type is not None
        )
        return dict(counts)

    def find_by_number(self, number: str) -> Optional[LegoSet]:
        """First set with the given set number (e.g. ``"21034-1"``), or None."""
        return next((s for s in self.get_all() if s.number == number), None)


__all__ = ["LegoSetRepository"]
