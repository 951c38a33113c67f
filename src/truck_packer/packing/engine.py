"""Packing engine: expands item quantities and fills containers one unit at a time."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from truck_packer.errors import InvalidContainerSize, ItemTooLarge
from truck_packer.models import Item, ItemId, PackResult, PlacedItem, PlacementOptions
from truck_packer.packing.strategy import (
    Candidate,
    Orientation,
    PlacementStrategy,
    get_strategy,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unit:
    """One physical rectangle to place."""

    id: ItemId
    width: float
    height: float
    name: Optional[str] = None

    @property
    def area(self) -> float:
        return self.width * self.height


def expand_quantities(items: Iterable[Item]) -> list[Unit]:
    """Every item with quantity q becomes q units, in input order."""
    units: list[Unit] = []
    for item in items:
        for _ in range(item.quantity):
            units.append(
                Unit(id=item.id, width=float(item.width), height=float(item.height), name=item.name)
            )
    return units


def orientations(unit: Unit, options: PlacementOptions) -> list[Orientation]:
    """
    Candidate footprints for a unit, margin included:
      (w+m, h+m) always, then (h+m, w+m) when rotation is allowed.
    """
    m = float(options.margin)
    out = [Orientation(unit.width + m, unit.height + m, False)]
    if options.allow_rotate:
        out.append(Orientation(unit.height + m, unit.width + m, True))
    return out


def _fits_bare(o: Orientation, width: float, height: float) -> bool:
    return o.width <= width and o.height <= height


def pack(
    items: Iterable[Item],
    container_width: float,
    container_height: float,
    options: Optional[PlacementOptions] = None,
    strategy: Optional[PlacementStrategy] = None,
) -> PackResult:
    """
    Pack items into as many identical containers as needed.

    - Units are processed in input order (or by descending area when
      options.sort_by_area is set; the sort is stable)
    - Each unit goes into the open container if the strategy finds room,
      otherwise a new container is opened and the unit goes at (0, 0) in the
      first orientation that fits
    - Deterministic, no state shared between calls

    Raises:
        InvalidContainerSize: width or height is not positive
        ItemTooLarge: some unit fits the empty container in no allowed orientation
    """
    if container_width <= 0 or container_height <= 0:
        raise InvalidContainerSize(container_width, container_height)

    options = options or PlacementOptions()
    if strategy is None:
        strategy = get_strategy(options.strategy)

    width = float(container_width)
    height = float(container_height)

    units = expand_quantities(items)
    if options.sort_by_area:
        units.sort(key=lambda u: u.area, reverse=True)

    # Reject oversize units before placing anything
    unit_orientations: list[list[Orientation]] = []
    for unit in units:
        cands = orientations(unit, options)
        if not any(_fits_bare(o, width, height) for o in cands):
            first = cands[0]
            raise ItemTooLarge(unit.id, first.width, first.height)
        unit_orientations.append(cands)

    containers: list[list[PlacedItem]] = []
    current: list[PlacedItem] = []
    layout = strategy.open_container(width, height)

    for unit, cands in zip(units, unit_orientations):
        candidate = strategy.find_placement(layout, cands)

        if candidate is None:
            if current:
                containers.append(current)
            current = []
            layout = strategy.open_container(width, height)
            logger.debug(f"Opened container {len(containers)} for item {unit.id!r}")

            o = next(o for o in cands if _fits_bare(o, width, height))
            candidate = Candidate(x=0.0, y=0.0, orientation=o)

        strategy.commit(layout, candidate)
        o = candidate.orientation
        current.append(
            PlacedItem(
                id=unit.id,
                name=unit.name,
                x=candidate.x,
                y=candidate.y,
                width=o.width,
                height=o.height,
                rotated=o.rotated,
                container_index=len(containers),
            )
        )
        logger.debug(
            f"Placed item {unit.id!r} at ({candidate.x}, {candidate.y}) "
            f"size={o.width}x{o.height} rotated={o.rotated} container={len(containers)}"
        )

    if current:
        containers.append(current)

    logger.info(
        f"strategy={strategy.name}, units={len(units)}, containers={len(containers)}, "
        f"container={width}x{height}"
    )

    return PackResult(containers=containers, count=len(containers))
