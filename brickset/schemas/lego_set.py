from __future__ import annotations

from enum import Enum
from typing import Any, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PackagingType(str, Enum):
    BLISTER_PACK = "BLISTER_PACK"
    BOX = "BOX"
    BOX_WITH_BACKING_CARD = "BOX_WITH_BACKING_CARD"
    BUCKET = "BUCKET"
    CANISTER = "CANISTER"
    FOIL_PACK = "FOIL_PACK"
    NONE = "NONE"  # sold unpackaged; not the same as a missing value
    NOT_SPECIFIED = "NOT_SPECIFIED"
    OTHER = "OTHER"
    PLASTIC_BOX = "PLASTIC_BOX"
    POLYBAG = "POLYBAG"
    TUB = "TUB"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Dimensions(BaseModel):
    height: Optional[float] = None
    width: Optional[float] = None
    depth: Optional[float] = None
    weight: Optional[float] = None

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "example": {"height": 26.2, "width": 38.2, "depth": 7.0, "weight": 0.9}
        },
    )

    @property
    def volume(self) -> Optional[float]:
        """width * height * depth, or None unless all three are known."""
        if self.width is None or self.height is None or self.depth is None:
            return None
        return self.width * self.height * self.depth


class LegoSet(BaseModel):
    number: Optional[str] = None
    name: Optional[str] = None
    year: Optional[int] = None
    theme: Optional[str] = None
    subtheme: Optional[str] = None
    theme_group: Optional[str] = Field(None, alias="themeGroup")
    category: Optional[str] = None
    packaging_type: Optional[PackagingType] = Field(None, alias="packagingType")
    availability: Optional[str] = None
    pieces: int = 0
    minifigs: Optional[int] = None
    tags: Optional[FrozenSet[str]] = None
    dimensions: Optional[Dimensions] = None
    url: Optional[str] = None

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "number": "21034-1",
                "name": "London",
                "year": 2017,
                "theme": "Architecture",
                "subtheme": "Skylines",
                "themeGroup": "Model making",
                "packagingType": "Box",
                "availability": "Retail",
                "pieces": 468,
                "tags": ["Big Ben", "London", "Microscale"],
                "dimensions": {"height": 26.2, "width": 26.2, "depth": 7.2},
            }
        },
    )

    @field_validator("packaging_type", mode="before")
    def normalize_packaging(cls, v: Any):  # type: ignore[override]
        # accepts "POLYBAG" as well as display labels like "Blister pack"
        if isinstance(v, str):
            key = v.strip().upper().replace(" ", "_").replace("-", "_")
            return key or None
        return v

    @field_validator("pieces", mode="before")
    def null_pieces(cls, v: Any):  # type: ignore[override]
        return 0 if v is None else v

    @property
    def tag_count(self) -> int:
        return len(self.tags) if self.tags else 0

    @property
    def volume(self) -> Optional[float]:
        return self.dimensions.volume if self.dimensions is not None else None

    def __str__(self) -> str:
        theme = self.theme or "no theme"
        year = self.year if self.year is not None else "?"
        number = self.number or "?"
        name = self.name or "unnamed"
        return f"{number} {name} ({theme}, {year}, {self.pieces} pcs)"

__all__ = ["PackagingType", "Dimensions", "LegoSet"]
