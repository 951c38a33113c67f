# src/truck_packer/packing/best_fit.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from truck_packer.packing.free_space import FreeRect, prune_contained, split_free_rects
from truck_packer.packing.strategy import Candidate, Orientation, PlacementStrategy


@dataclass
class FreeSpaceLayout:
    width: float
    height: float
    free_rects: list[FreeRect] = field(default_factory=list)


def short_side_score(free: FreeRect, o: Orientation) -> tuple[float, float]:
    """
    Best-Short-Side-Fit score (lower is better):
      (smallest leftover side, largest leftover side)
    """
    leftover_w = free.width - o.width
    leftover_h = free.height - o.height
    return (min(leftover_w, leftover_h), max(leftover_w, leftover_h))


class BestFitStrategy(PlacementStrategy):
    """
    Best-Short-Side-Fit over the container's free rectangles.
    - Scans every orientation x every free rectangle
    - Picks the pair leaving the tightest leftover strip, first one wins ties
    - Places at the free rectangle's origin, then guillotine-splits the free list
    """

    name = "best_fit"

    def __init__(self, prune: bool = False) -> None:
        self.prune = prune

    def open_container(self, width: float, height: float) -> FreeSpaceLayout:
        return FreeSpaceLayout(
            width=width,
            height=height,
            free_rects=[FreeRect(0.0, 0.0, float(width), float(height))],
        )

    def find_placement(
        self,
        layout: FreeSpaceLayout,
        orientations: list[Orientation],
    ) -> Optional[Candidate]:
        best: Optional[Candidate] = None
        best_score: Optional[tuple[float, float]] = None

        for o in orientations:
            for i, free in enumerate(layout.free_rects):
                if o.width > free.width or o.height > free.height:
                    continue
                score = short_side_score(free, o)
                if best_score is None or score < best_score:
                    best_score = score
                    best = Candidate(x=free.x, y=free.y, orientation=o, slot=i)

        return best

    def commit(self, layout: FreeSpaceLayout, candidate: Candidate) -> None:
        o = candidate.orientation
        footprint = FreeRect(candidate.x, candidate.y, o.width, o.height)
        layout.free_rects = split_free_rects(layout.free_rects, footprint)
        if self.prune:
            layout.free_rects = prune_contained(layout.free_rects)
