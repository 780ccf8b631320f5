"""Sequence helpers."""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def chunk_array(items: Sequence[T], items_per_chunk: int) -> List[Sequence[T]]:
    """
    Split a sequence into consecutive chunks of ``items_per_chunk`` elements.

    The last chunk may be shorter. A sequence that already fits in one chunk
    is returned as is, wrapped in a single-element list.

    Example:
      chunk_array([1, 2, 3], 5)       -> [[1, 2, 3]]
      chunk_array([1, 2, 3, 4, 5], 2) -> [[1, 2], [3, 4], [5]]

    Raises:
        TypeError: items_per_chunk is not an int
        ValueError: items_per_chunk is zero or negative
    """
    if isinstance(items_per_chunk, bool) or not isinstance(items_per_chunk, int):
        raise TypeError(f"items_per_chunk must be an int, got {type(items_per_chunk).__name__}")
    if items_per_chunk <= 0:
        raise ValueError(f"items_per_chunk must be positive, got {items_per_chunk}")

    if len(items) <= items_per_chunk:
        return [items]

    return [items[i:i + items_per_chunk] for i in range(0, len(items), items_per_chunk)]
