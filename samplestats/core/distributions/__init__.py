"""Probability distributions.

Each distribution is an immutable parameter object validated once at
construction (``BadParamsError`` on invalid parameters) and implements the
subset of capability interfaces from :mod:`.base` for which it has a closed
form. Sampling takes an injected random source.
"""

from .base import (
    Distribution,
    Univariate,
    Mean,
    Variance,
    Entropy,
    Skewness,
    Median,
    Mode,
    Continuous,
    Discrete,
    resolve_rng,
)
from .uniform import Uniform
from .discrete_uniform import DiscreteUniform
from .normal import Normal
from .chi_squared import ChiSquared
from .special import gamma_lr, standard_normal_ppf

__all__ = [
    # Capabilities
    "Distribution",
    "Univariate",
    "Mean",
    "Variance",
    "Entropy",
    "Skewness",
    "Median",
    "Mode",
    "Continuous",
    "Discrete",
    "resolve_rng",

    # Distributions
    "Uniform",
    "DiscreteUniform",
    "Normal",
    "ChiSquared",

    # Special functions
    "gamma_lr",
    "standard_normal_ppf",
]
