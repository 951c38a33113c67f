from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

ItemId = Union[int, str]


class Item(BaseModel):
    """Rectangular item row with a quantity."""

    id: ItemId = Field(description="Identifier shared by every unit of this item")
    width: float = Field(gt=0, description="Nominal width of the item")
    height: float = Field(gt=0, description="Nominal height of the item")
    quantity: int = Field(default=1, ge=1, description="Number of physical units")
    name: Optional[str] = Field(default=None, description="Display label")


class PlacementOptions(BaseModel):
    """Options for a single packing run."""

    allow_rotate: bool = Field(
        default=True,
        description="Allow swapping width/height per unit",
    )
    margin: float = Field(
        default=0.0,
        ge=0,
        description="Clearance added to both placed dimensions of every unit",
    )
    # Stable descending-area order instead of input order
    sort_by_area: bool = Field(default=False)
    strategy: Literal["best_fit", "shelf"] = Field(
        default="best_fit",
        description="Placement heuristic used inside each container",
    )


class PlacedItem(BaseModel):
    """Unit placed in a container at its effective (inflated, oriented) size."""

    id: ItemId = Field(description="Identifier of the source item")
    name: Optional[str] = Field(default=None, description="Display label of the source item")
    x: float = Field(ge=0, description="X coordinate of the lower-left corner")
    y: float = Field(ge=0, description="Y coordinate of the lower-left corner")
    width: float = Field(gt=0, description="Placed width including margin")
    height: float = Field(gt=0, description="Placed height including margin")
    rotated: bool = Field(default=False, description="Width and height swapped relative to the item")
    container_index: int = Field(ge=0, description="Index of the container holding this unit")


class PackResult(BaseModel):
    """Standard result returned by the packing engine."""

    containers: list[list[PlacedItem]] = Field(default_factory=list)
    count: int = 0
