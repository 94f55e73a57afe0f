"""Product domain used by the catalog criteria."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Color(str, Enum):
    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"


class Size(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    YUGE = "Yuge"


class Product(BaseModel):
    """Immutable catalog entry.

    Equality is structural (all fields compared).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    color: Color
    size: Size
