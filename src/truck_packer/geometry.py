"""Geometry utilities for 2D packing."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import PackResult, PlacedItem

Bounds = tuple[float, float, float, float]


def rects_overlap(a: Bounds, b: Bounds) -> bool:
    """
    Axis-aligned rectangle overlap test.

    a, b are bounds: (x1, y1, x2, y2)

    Overlap exists only if they overlap on BOTH axes with positive area.
    Touching edges (ax2 == bx1) is NOT considered overlap.
    """
    ax1, ay1, ax2, ay2 = a
    bx1, by1, bx2, by2 = b

    return (ax1 < bx2 and ax2 > bx1) and (ay1 < by2 and ay2 > by1)


def rect_contains(outer: Bounds, inner: Bounds) -> bool:
    """True if `inner` lies entirely within `outer` (shared edges allowed)."""
    ox1, oy1, ox2, oy2 = outer
    ix1, iy1, ix2, iy2 = inner
    return ix1 >= ox1 and iy1 >= oy1 and ix2 <= ox2 and iy2 <= oy2


def placement_bounds(p: "PlacedItem") -> Bounds:
    x, y = float(p.x), float(p.y)
    return (x, y, x + float(p.width), y + float(p.height))


def within_container(p: "PlacedItem", width: float, height: float) -> bool:
    return rect_contains((0.0, 0.0, float(width), float(height)), placement_bounds(p))


def check_layout(result: "PackResult", width: float, height: float) -> list[str]:
    """
    Validate a packing result against its container size.

    Returns a list of human-readable violations:
    - footprints outside [0, width) x [0, height)
    - overlapping footprints inside one container
    - container_index not matching the container the item sits in
    An empty list means the layout is valid.
    """
    problems: list[str] = []

    if result.count != len(result.containers):
        problems.append(
            f"count={result.count} but {len(result.containers)} containers returned"
        )

    for index, placed in enumerate(result.containers):
        bounds = [placement_bounds(p) for p in placed]

        for p, b in zip(placed, bounds):
            if p.container_index != index:
                problems.append(
                    f"item {p.id!r} in container {index} has container_index={p.container_index}"
                )
            if not within_container(p, width, height):
                problems.append(f"item {p.id!r} in container {index} exceeds bounds: {b}")

        for i in range(len(bounds)):
            for j in range(i + 1, len(bounds)):
                if rects_overlap(bounds[i], bounds[j]):
                    problems.append(
                        f"items {placed[i].id!r} and {placed[j].id!r} overlap in container {index}"
                    )

    return problems
