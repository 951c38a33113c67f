"""Data schemas for input/output operations."""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from truck_packer.models import Item, PackResult, PlacementOptions


class _Schema(BaseModel):
    # Accept both snake_case and the scenario API's camelCase keys
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScenarioItem(_Schema):
    """One item row of a scenario."""
    id: Optional[Union[int, str]] = Field(default=None, description="Row identifier; row position when missing")
    name: str = Field(default="", description="Display label")
    width: float = Field(gt=0, description="Width of the item")
    height: float = Field(gt=0, description="Height of the item")
    quantity: int = Field(default=1, description="Quantity; rows with quantity <= 0 are skipped")


class PackRequest(_Schema):
    """Schema for a packing request."""
    truck_width: float = Field(description="Container width")
    truck_height: float = Field(description="Container height")
    allow_rotate: bool = True
    margin: float = Field(default=0.0, ge=0)
    sort_by_area: bool = False
    strategy: Optional[Literal["best_fit", "shelf"]] = None
    items: list[ScenarioItem] = Field(default_factory=list)

    def to_items(self) -> list[Item]:
        """
        Engine items, skipping rows with a non-positive quantity.

        A row without an id gets its 1-based position, or the next integer
        not already used as an explicit id.
        """
        taken = {row.id for row in self.items if row.id is not None}
        items: list[Item] = []
        for index, row in enumerate(self.items, start=1):
            item_id = row.id
            if item_id is None:
                item_id = index
                while item_id in taken:
                    item_id += 1
                taken.add(item_id)
            if row.quantity <= 0:
                continue
            items.append(
                Item(
                    id=item_id,
                    width=row.width,
                    height=row.height,
                    quantity=row.quantity,
                    name=row.name or None,
                )
            )
        return items

    def to_options(self, default_strategy: str = "best_fit") -> PlacementOptions:
        return PlacementOptions(
            allow_rotate=self.allow_rotate,
            margin=self.margin,
            sort_by_area=self.sort_by_area,
            strategy=self.strategy or default_strategy,
        )


class Scenario(PackRequest):
    """Saved packing scenario as exchanged with the scenario service."""
    id: Optional[int] = None
    name: str = Field(min_length=1)
    description: Optional[str] = None
    is_favorite: bool = False


class PackResponse(BaseModel):
    """Schema for a packing response."""
    count: int = Field(ge=0, description="Number of containers used")
    containers: list[list[dict[str, Any]]] = Field(description="Placed items per container")
    metrics: dict[str, Any]

    @classmethod
    def from_result(cls, result: PackResult, metrics: dict[str, Any]) -> "PackResponse":
        return cls(
            count=result.count,
            containers=[[p.model_dump() for p in placed] for placed in result.containers],
            metrics=metrics,
        )
