"""Placement strategies: base class, shared types and registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple, Optional


class Orientation(NamedTuple):
    """Effective (margin-inflated) footprint of a unit in one orientation."""

    width: float
    height: float
    rotated: bool


@dataclass(frozen=True)
class Candidate:
    """A chosen position for a unit inside the open container.

    `slot` is strategy-specific (free-rectangle index, shelf index, ...);
    None means "start fresh at the origin of an empty container".
    """

    x: float
    y: float
    orientation: Orientation
    slot: Optional[int] = None


class PlacementStrategy:
    """Base class for the per-container placement heuristics."""

    name = "base"

    def open_container(self, width: float, height: float) -> Any:
        """
        Create the bookkeeping state of an empty container.

        Args:
            width: Container width
            height: Container height

        Returns:
            Strategy-specific layout state
        """
        raise NotImplementedError

    def find_placement(self, layout: Any, orientations: list[Orientation]) -> Optional[Candidate]:
        """
        Search the open container for a position of one unit.

        Returns:
            The chosen candidate, or None if no orientation fits anywhere
        """
        raise NotImplementedError

    def commit(self, layout: Any, candidate: Candidate) -> None:
        """Record the unit at `candidate` and update the layout state."""
        raise NotImplementedError


def get_strategy(name: str) -> PlacementStrategy:
    from truck_packer.packing.best_fit import BestFitStrategy
    from truck_packer.packing.shelf import ShelfStrategy

    strategies: dict[str, type[PlacementStrategy]] = {
        BestFitStrategy.name: BestFitStrategy,
        ShelfStrategy.name: ShelfStrategy,
    }
    key = name.strip().lower()
    if key not in strategies:
        raise ValueError(f"Unknown strategy '{name}'. Valid: {sorted(strategies)}")
    return strategies[key]()
