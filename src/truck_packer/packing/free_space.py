"""Free-rectangle bookkeeping for one container."""

from __future__ import annotations

from dataclasses import dataclass

from truck_packer.geometry import Bounds, rect_contains, rects_overlap


@dataclass(frozen=True)
class FreeRect:
    x: float
    y: float
    width: float
    height: float

    @property
    def bounds(self) -> Bounds:
        return (self.x, self.y, self.x + self.width, self.y + self.height)


def split_free_rects(free_rects: list[FreeRect], placed: FreeRect) -> list[FreeRect]:
    """
    Subtract a placed footprint from every free rectangle it overlaps.

    An overlapped free rectangle is replaced by up to four strips:
      left / right of the footprint (full height of the free rectangle),
      above / below the footprint (full width of the free rectangle).
    Untouched rectangles are kept. The result may contain overlapping or
    nested rectangles; see prune_contained().
    """
    out: list[FreeRect] = []
    px1, py1, px2, py2 = placed.bounds

    for free in free_rects:
        if not rects_overlap(free.bounds, placed.bounds):
            out.append(free)
            continue

        fx1, fy1, fx2, fy2 = free.bounds

        # left
        if px1 > fx1:
            out.append(FreeRect(fx1, fy1, px1 - fx1, free.height))
        # right
        if px2 < fx2:
            out.append(FreeRect(px2, fy1, fx2 - px2, free.height))
        # above
        if py2 < fy2:
            out.append(FreeRect(fx1, py2, free.width, fy2 - py2))
        # below
        if py1 > fy1:
            out.append(FreeRect(fx1, fy1, free.width, py1 - fy1))

    return [r for r in out if r.width > 0 and r.height > 0]


def prune_contained(free_rects: list[FreeRect]) -> list[FreeRect]:
    """
    Drop free rectangles fully contained in another one.

    O(n^2). Of two identical rectangles the first is kept, so the surviving
    order matches the input order.
    """
    kept: list[FreeRect] = []
    for i, rect in enumerate(free_rects):
        redundant = False
        for j, other in enumerate(free_rects):
            if i == j or not rect_contains(other.bounds, rect.bounds):
                continue
            if rect != other or j < i:
                redundant = True
                break
        if not redundant:
            kept.append(rect)
    return kept
