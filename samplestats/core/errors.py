"""
Exception types for samplestats.

Two failure idioms are used throughout the package:
- Construction-time validation (distributions) raises BadParamsError.
- Query-time statistics return NaN when the answer is undefined for the
  input (empty data, out-of-range order or quantile). Only the strict tier
  of ``Sample`` converts those into UndefinedStatisticError.

Precondition violations (paired arrays of different length, selection rank
out of range) raise immediately and are caller bugs.
"""


class StatsError(Exception):
    """Base class for all samplestats errors."""


class BadParamsError(StatsError, ValueError):
    """Distribution parameters are invalid (NaN bound, ordering violation, ...)."""


class ContainersMustBeSameLengthError(StatsError, ValueError):
    """Paired containers were given with different lengths."""

    def __init__(self, n1: int, n2: int):
        super().__init__(f"Containers must be the same length, got {n1} and {n2}")
        self.n1 = n1
        self.n2 = n2


class RankOutOfRangeError(StatsError, IndexError):
    """Selection rank does not address an element of the buffer."""

    def __init__(self, rank: int, length: int):
        super().__init__(f"rank {rank} out of range for buffer of length {length}")
        self.rank = rank
        self.length = length


class UndefinedStatisticError(StatsError, ArithmeticError):
    """A statistic is undefined for the given data (strict mode only)."""
