"""
Core Mathematical Functions for Spherical Harmonics

This module provides the mathematical operations behind the encoder's lookup
tables: ACN channel indexing, SN3D normalization, the elevation-dependent
associated Legendre factor, direct evaluation of real spherical harmonics,
and the per-degree weighting used to widen a source.

All harmonics follow the AmbiX convention (ACN ordering, SN3D normalization,
no Condon-Shortley phase). Angles are in radians unless a function name says
otherwise; the lookup tables convert from degrees.

See Also:
    - tables: For the precomputed lookup tables built from these functions
    - config: For table dimensions and the maximum supported order
"""

import functools
import math
from typing import Union

import numpy as np
from scipy import special

from .exceptions import MathError

# Cache size for factorial memoization
_FACTORIAL_CACHE_SIZE = 50


@functools.lru_cache(maxsize=_FACTORIAL_CACHE_SIZE)
def factorial(n: int) -> int:
    """
    Compute factorial, optimized with caching for repeated calls.

    Args:
        n: Non-negative integer

    Returns:
        n! (n factorial)

    Raises:
        MathError.DomainError: If n is negative
    """
    if n < 0:
        raise MathError.DomainError("Factorial not defined for negative numbers")
    if n <= 1:
        return 1

    return n * factorial(n - 1)


def _check_degree_index(degree: int, index: int) -> None:
    if degree < 0:
        raise MathError.DomainError(f"Degree l must be non-negative, got {degree}")
    if abs(index) > degree:
        raise MathError.DomainError(f"Index m must satisfy -l <= m <= l, got l={degree}, m={index}")


def channel_count(order: int) -> int:
    """Number of ambisonic channels for the given order, (order+1)²."""
    if order < 0:
        raise MathError.DomainError(f"Ambisonic order must be non-negative, got {order}")
    return (order + 1) ** 2


def acn_index(degree: int, index: int) -> int:
    """
    Ambisonic Channel Number for degree l and index m.

    Examples:
        >>> acn_index(1, -1), acn_index(1, 0), acn_index(1, 1)
        (1, 2, 3)
    """
    _check_degree_index(degree, index)
    return degree * degree + degree + index


def sn3d_normalization(degree: int, index: int) -> float:
    """
    Schmidt semi-normalization factor for degree l and index m.

    N_l^|m| = sqrt((2 - δ_m0) (l-|m|)! / (l+|m|)!)
    """
    _check_degree_index(degree, index)
    m = abs(index)
    norm = math.sqrt(factorial(degree - m) / factorial(degree + m))
    if m != 0:
        norm *= math.sqrt(2.0)
    return norm


def legendre_elevation_factor(degree: int, index: int,
                              elevation: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """
    Elevation-dependent factor of a real SN3D spherical harmonic.

    This is N_l^|m| * P_l^|m|(sin(elevation)). It depends on |m| only, which
    is why the lookup table stores one column per (l, |m|) pair.

    Args:
        degree: Degree l (l >= 0)
        index: Index m (-l <= m <= l); only |m| is used
        elevation: Elevation angle(s) in radians, 0 = horizon, π/2 = up

    Returns:
        The elevation factor, scalar or array matching the input
    """
    _check_degree_index(degree, index)
    m = abs(index)

    # scipy includes the Condon-Shortley phase, AmbiX does not
    plm = special.lpmv(m, degree, np.sin(elevation))
    value = (-1) ** m * sn3d_normalization(degree, m) * plm

    return value if isinstance(elevation, np.ndarray) else float(value)


def azimuth_factor(index: int, azimuth: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """
    Azimuth-dependent factor of a real spherical harmonic.

    cos(m·azimuth) for m > 0, sin(|m|·azimuth) for m < 0 and 1 for m = 0.
    """
    if index > 0:
        return np.cos(index * azimuth)
    if index < 0:
        return np.sin(-index * azimuth)
    return np.ones_like(azimuth) if isinstance(azimuth, np.ndarray) else 1.0


def real_spherical_harmonic(degree: int, index: int, azimuth: float, elevation: float) -> float:
    """
    Compute the real-valued SN3D spherical harmonic Y_l^m(azimuth, elevation).

    Args:
        degree: Degree of the spherical harmonic (l >= 0)
        index: Order index of the spherical harmonic (-l <= m <= l)
        azimuth: Azimuth in radians, 0 = front, π/2 = left
        elevation: Elevation in radians, 0 = horizon, π/2 = up

    Returns:
        The value of the real spherical harmonic

    Examples:
        >>> real_spherical_harmonic(1, 1, 0.0, 0.0)  # X channel, front
        1.0
    """
    return float(legendre_elevation_factor(degree, index, elevation) * azimuth_factor(index, azimuth))


def spread_weights(spread: Union[float, np.ndarray], max_degree: int) -> np.ndarray:
    """
    Per-degree weights that widen a point source by the given spread.

    The widened source is modelled as a point source diffused over the
    sphere with an angular standard deviation of half the spread. On the
    sphere that diffusion scales degree l by exp(-l(l+1)σ²/2), so higher
    degrees (the more directional components) vanish faster than lower ones
    and the omnidirectional degree 0 is left untouched.

    Args:
        spread: Source width(s) in degrees, 0 = point source
        max_degree: Highest degree to return a weight for

    Returns:
        Array of shape (..., max_degree) holding weights for degrees 1..max_degree,
        each in [0, 1], non-increasing in both spread and degree
    """
    if max_degree < 1:
        raise MathError.DomainError(f"Maximum degree must be at least 1, got {max_degree}")

    sigma = np.radians(np.asarray(spread, dtype=float)) / 2.0
    degrees = np.arange(1, max_degree + 1)
    exponent = -0.5 * np.multiply.outer(sigma ** 2, degrees * (degrees + 1))
    return np.exp(exponent)
