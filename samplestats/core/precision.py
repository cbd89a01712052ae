"""samplestats.core.precision

Floating-point comparison helpers.
"""

from __future__ import annotations

import math

DEFAULT_F64_ACC = 1e-11


def almost_eq(a: float, b: float, acc: float = DEFAULT_F64_ACC) -> bool:
    """True if ``a`` and ``b`` differ by less than ``acc``.

    Infinities compare equal only to an infinity of the same sign; NaN is
    never almost equal to anything.
    """
    if math.isinf(a) and math.isinf(b):
        return a == b
    return a == b or abs(a - b) < acc
