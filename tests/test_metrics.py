from __future__ import annotations

import pytest

from truck_packer.metrics import compute_metrics, container_metrics
from truck_packer.models import Item, PackResult
from truck_packer.packing.engine import pack


def test_compute_metrics_two_items():
    items = [
        Item(id=1, width=400, height=300),
        Item(id=2, width=600, height=400),
    ]
    result = pack(items, 1200, 800)

    metrics = compute_metrics(result, 1200, 800)

    assert metrics["container_count"] == 1
    assert metrics["total_units"] == 2
    assert metrics["used_area"] == pytest.approx(360_000)
    assert metrics["total_area"] == pytest.approx(960_000)
    assert metrics["fill_rate"] == pytest.approx(0.375)
    assert metrics["containers"] == [
        {"index": 0, "units": 2, "used_area": pytest.approx(360_000), "fill_rate": pytest.approx(0.375)}
    ]


def test_full_containers():
    result = pack([Item(id=1, width=1200, height=800, quantity=3)], 1200, 800)

    metrics = compute_metrics(result, 1200, 800)

    assert metrics["fill_rate"] == pytest.approx(1.0)
    assert [c["fill_rate"] for c in metrics["containers"]] == [pytest.approx(1.0)] * 3


def test_empty_result():
    metrics = compute_metrics(PackResult(), 1200, 800)

    assert metrics["container_count"] == 0
    assert metrics["total_units"] == 0
    assert metrics["fill_rate"] == 0.0
    assert metrics["containers"] == []


def test_container_metrics_zero_area():
    assert container_metrics([], 0, 10) == (0.0, 0.0, 0.0)
