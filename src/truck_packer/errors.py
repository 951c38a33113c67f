"""Errors raised by the packing engine."""

from __future__ import annotations

from typing import Any


class PackingError(ValueError):
    """Base class for failures that abort a whole packing run."""


class InvalidContainerSize(PackingError):
    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Invalid container size {width} x {height}: both dimensions must be positive"
        )


class ItemTooLarge(PackingError):
    """A unit does not fit an empty container in any allowed orientation."""

    def __init__(self, item_id: Any, width: float, height: float) -> None:
        self.item_id = item_id
        self.width = width
        self.height = height
        super().__init__(
            f"Item '{item_id}' ({width} x {height}) is larger than the container"
        )
