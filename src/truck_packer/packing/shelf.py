# src/truck_packer/packing/shelf.py
#
# Shelf (row) placement: units are laid left to right on horizontal shelves,
# shelves are stacked bottom to top. A shelf's height is fixed by the unit
# that opened it.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from truck_packer.packing.strategy import Candidate, Orientation, PlacementStrategy


@dataclass
class Shelf:
    y: float
    height: float
    x_cursor: float = 0.0


@dataclass
class ShelfLayout:
    width: float
    height: float
    shelves: list[Shelf] = field(default_factory=list)

    def used_height(self) -> float:
        if not self.shelves:
            return 0.0
        last = self.shelves[-1]
        return last.y + last.height


class ShelfStrategy(PlacementStrategy):
    name = "shelf"

    def open_container(self, width: float, height: float) -> ShelfLayout:
        return ShelfLayout(width=float(width), height=float(height))

    def find_placement(
        self,
        layout: ShelfLayout,
        orientations: list[Orientation],
    ) -> Optional[Candidate]:
        for o in orientations:
            # existing shelves, first fit
            for i, shelf in enumerate(layout.shelves):
                if o.height <= shelf.height and shelf.x_cursor + o.width <= layout.width:
                    return Candidate(x=shelf.x_cursor, y=shelf.y, orientation=o, slot=i)

            # new shelf on top
            top = layout.used_height()
            if o.width <= layout.width and top + o.height <= layout.height:
                return Candidate(x=0.0, y=top, orientation=o, slot=None)

        return None

    def commit(self, layout: ShelfLayout, candidate: Candidate) -> None:
        o = candidate.orientation
        if candidate.slot is None:
            shelf = Shelf(y=layout.used_height(), height=o.height)
            layout.shelves.append(shelf)
        else:
            shelf = layout.shelves[candidate.slot]
        shelf.x_cursor += o.width
