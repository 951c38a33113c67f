from __future__ import annotations

from typing import Any

from truck_packer.models import PackResult, PlacedItem


def placement_area(p: PlacedItem) -> float:
    # width/height are the placed footprint (margin included)
    return float(p.width) * float(p.height)


def container_metrics(placed: list[PlacedItem], width: float, height: float) -> tuple[float, float, float]:
    used_area = sum(placement_area(p) for p in placed)
    container_area = float(width) * float(height)
    fill_rate = 0.0 if container_area == 0 else used_area / container_area
    return used_area, container_area, fill_rate


def compute_metrics(result: PackResult, width: float, height: float) -> dict[str, Any]:
    """
    Summary metrics for a packing result.

    Returns:
        dict with container_count, total_units, used_area, total_area,
        fill_rate (over all containers) and a per-container breakdown
    """
    per_container: list[dict[str, Any]] = []
    used_total = 0.0
    for index, placed in enumerate(result.containers):
        used_area, container_area, fill_rate = container_metrics(placed, width, height)
        used_total += used_area
        per_container.append(
            {
                "index": index,
                "units": len(placed),
                "used_area": used_area,
                "fill_rate": fill_rate,
            }
        )

    total_area = float(width) * float(height) * result.count
    return {
        "container_count": result.count,
        "total_units": sum(len(c) for c in result.containers),
        "used_area": used_total,
        "total_area": total_area,
        "fill_rate": 0.0 if total_area == 0 else used_total / total_area,
        "containers": per_container,
    }
