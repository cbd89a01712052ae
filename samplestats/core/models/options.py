"""
Options for the statistics surface.

This module defines configuration for :class:`~samplestats.core.models.sample.Sample`,
including the sort-engine cutoff and how undefined statistics are reported.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..statistics.sorting import INSERTION_SORT_THRESHOLD


@dataclass
class StatsOptions:
    """
    Configuration options for sample statistics.

    Attributes:
        insertion_sort_threshold: Buffers up to this length are ranked with
            insertion sort instead of quicksort (default: 10)
        strict: If True, undefined statistics raise UndefinedStatisticError
            instead of returning NaN (default: False)
        log_sentinels: If True, each NaN returned for undefined input is
            logged at DEBUG level with its reason (default: False)
    """

    insertion_sort_threshold: int = INSERTION_SORT_THRESHOLD
    strict: bool = False
    log_sentinels: bool = False

    def __post_init__(self):
        """Validate options after initialization."""
        if isinstance(self.insertion_sort_threshold, bool) or not isinstance(
            self.insertion_sort_threshold, int
        ):
            raise ValueError("insertion_sort_threshold must be an integer")
        if self.insertion_sort_threshold < 2:
            raise ValueError("insertion_sort_threshold must be at least 2")

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "insertion_sort_threshold": self.insertion_sort_threshold,
            "strict": self.strict,
            "log_sentinels": self.log_sentinels,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StatsOptions':
        """
        Create StatsOptions from a dictionary.

        Args:
            data: Dictionary with option values

        Returns:
            New StatsOptions instance
        """
        return cls(
            insertion_sort_threshold=int(data.get("insertion_sort_threshold", INSERTION_SORT_THRESHOLD)),
            strict=bool(data.get("strict", False)),
            log_sentinels=bool(data.get("log_sentinels", False)),
        )

    @classmethod
    def default(cls) -> 'StatsOptions':
        """Options with default values (NaN sentinels, no logging)."""
        return cls()

    @classmethod
    def strict_mode(cls) -> 'StatsOptions':
        """Options that raise on undefined statistics instead of returning NaN."""
        return cls(strict=True)

    def __repr__(self) -> str:
        return (
            f"StatsOptions("
            f"threshold={self.insertion_sort_threshold}, "
            f"strict={self.strict})"
        )
