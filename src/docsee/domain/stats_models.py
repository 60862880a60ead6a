from __future__ import annotations

"""
Aggregate Statistics Model.

Immutable counters produced by the statistics aggregator. Merging is
plain integer addition, so partial results can be combined in any order.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AggregateStatistics:
    """
    Cumulative metrics for a document tree.

    Attributes:
        folder_count: Number of subtrees at any depth, empty ones included.
        file_count: Number of leaves with a download URL.
        word_count: Whitespace-delimited tokens over all fetched bodies.
        total_size_bytes: Summed length of all fetched bodies.
    """
    folder_count: int = 0
    file_count: int = 0
    word_count: int = 0
    total_size_bytes: int = 0

    def __add__(self, other: "AggregateStatistics") -> "AggregateStatistics":
        if not isinstance(other, AggregateStatistics):
            return NotImplemented
        return AggregateStatistics(
            folder_count=self.folder_count + other.folder_count,
            file_count=self.file_count + other.file_count,
            word_count=self.word_count + other.word_count,
            total_size_bytes=self.total_size_bytes + other.total_size_bytes,
        )

    @property
    def average_size_kb(self) -> float:
        """Mean body size in KB, 0.0 for an empty tree."""
        if self.file_count <= 0:
            return 0.0
        return (self.total_size_bytes / self.file_count) / 1024
