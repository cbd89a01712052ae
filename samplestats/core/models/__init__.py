"""
Data models for samplestats.

This module provides:
- StatsOptions: Configuration for the statistics surface
- Sample: Buffer wrapper exposing descriptive and order statistics
"""

from .options import StatsOptions
from .sample import Sample

__all__ = [
    "StatsOptions",
    "Sample",
]
