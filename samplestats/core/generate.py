"""samplestats.core.generate

Deterministic sample generators.

Each finite generator returns a float64 array; the ``*_iter`` variants yield
the same values lazily and never stop.

periodic (sawtooth in [0, amplitude)):
    x_i = amplitude * frac((i - delay) * frequency / sampling_rate + phase)

sinusoidal:
    x_i = mean + amplitude * sin(2 pi (i - delay) * frequency / sampling_rate + phase)
"""

from __future__ import annotations

import itertools
import math
from typing import Iterator

import numpy as np


def periodic_iter(
    sampling_rate: float,
    frequency: float,
    amplitude: float = 1.0,
    phase: float = 0.0,
    delay: int = 0,
) -> Iterator[float]:
    """Infinite sawtooth sequence, see :func:`periodic`."""
    if sampling_rate <= 0.0:
        raise ValueError("sampling_rate must be positive")
    step = frequency / sampling_rate
    for i in itertools.count():
        yield amplitude * (((i - delay) * step + phase) % 1.0)


def periodic(
    length: int,
    sampling_rate: float,
    frequency: float,
    amplitude: float = 1.0,
    phase: float = 0.0,
    delay: int = 0,
) -> np.ndarray:
    """Sawtooth samples.

    Args:
        length: number of samples
        sampling_rate: samples per unit time (> 0)
        frequency: cycles per unit time
        amplitude: height of each ramp
        phase: offset as a fraction of a cycle
        delay: shift in samples

    Returns:
        Array of ``length`` values in ``[0, amplitude)``
    """
    source = periodic_iter(sampling_rate, frequency, amplitude, phase, delay)
    return np.fromiter(itertools.islice(source, length), dtype=float, count=length)


def sinusoidal_iter(
    sampling_rate: float,
    frequency: float,
    amplitude: float,
    mean: float = 0.0,
    phase: float = 0.0,
    delay: int = 0,
) -> Iterator[float]:
    """Infinite sine sequence, see :func:`sinusoidal`."""
    if sampling_rate <= 0.0:
        raise ValueError("sampling_rate must be positive")
    step = 2.0 * math.pi * frequency / sampling_rate
    for i in itertools.count():
        yield mean + amplitude * math.sin((i - delay) * step + phase)


def sinusoidal(
    length: int,
    sampling_rate: float,
    frequency: float,
    amplitude: float,
    mean: float = 0.0,
    phase: float = 0.0,
    delay: int = 0,
) -> np.ndarray:
    """Sine wave samples (phase in radians)."""
    source = sinusoidal_iter(sampling_rate, frequency, amplitude, mean, phase, delay)
    return np.fromiter(itertools.islice(source, length), dtype=float, count=length)
