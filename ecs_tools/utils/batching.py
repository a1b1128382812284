"""Batching helpers for ECS describe calls."""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def chunk(items: Sequence[T], count: int) -> list[list[T]]:
    """Split a sequence into contiguous batches of at most ``count`` items.

    Args:
        items: Ordered items to split
        count: Maximum batch size, must be positive

    Returns:
        List of batches covering ``items`` in order. Empty input gives an
        empty list.

    Raises:
        ValueError: If ``count`` is not positive
    """
    if count <= 0:
        raise ValueError(f"Batch size must be positive, got {count}")
    return [list(items[i : i + count]) for i in range(0, len(items), count)]
