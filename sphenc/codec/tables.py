"""
Precomputed Lookup Tables

This module builds the two constant tables the directional encoder reads
from. Both are computed once at import time at 1-degree resolution, frozen
(read-only numpy arrays) and shared by every encoder instance.

SphericalHarmonicsTable stores real spherical harmonics in factored form:
an elevation part holding the SN3D associated Legendre factor per (l, |m|),
and an azimuth part holding the sine and cosine terms per m. Multiplying an
elevation term by the matching azimuth term reconstructs Y_l^m. Storing the
factors instead of the full 2-D grid needs 181 × 9 + 360 × 6 values at
order 3 rather than 360 × 181 × 16.

MaxReWeightTable stores per-degree weights indexed by spread, used to pull
energy out of the directional components as a source widens.

Neither table validates its indices; callers clamp before looking up.
"""

import logging

import numpy as np

from .config import MAX_ORDER, AZIMUTH_TABLE_SIZE, ELEVATION_TABLE_SIZE, SPREAD_TABLE_SIZE
from .math_utils import legendre_elevation_factor, spread_weights

# Set up logging
logger = logging.getLogger(__name__)


def elevation_term_count(max_order: int = MAX_ORDER) -> int:
    """Number of elevation terms for degrees 1..max_order (one per (l, |m|) pair)."""
    return max_order * (max_order + 3) // 2


def elevation_term_index(degree: int, index: int) -> int:
    """
    Column of the elevation table holding the factor for (l, |m|).

    Degrees are packed one after another in triangular blocks:
    l(l+1)/2 + |m| - 1.
    """
    return degree * (degree + 1) // 2 + abs(index) - 1


def azimuth_term_index(index: int, max_order: int = MAX_ORDER) -> int:
    """
    Column of the azimuth table holding the factor for m != 0.

    Sine terms occupy the first max_order slots in descending frequency,
    cosine terms the next max_order slots in ascending frequency:
    [sin(N·az) .. sin(az), cos(az) .. cos(N·az)].
    """
    if index > 0:
        return max_order + index - 1
    return max_order + index


class SphericalHarmonicsTable:
    """
    Real spherical harmonics factored into elevation and azimuth parts.

    Attributes:
        max_order: Highest degree covered by the table
        elevation: Array of shape (181, elevation_term_count(max_order)),
            row = elevation in degrees + 90
        azimuth: Array of shape (360, 2 * max_order), row = azimuth in degrees
    """

    def __init__(self, max_order: int = MAX_ORDER):
        self.max_order = max_order
        self.elevation = self._build_elevation(max_order)
        self.azimuth = self._build_azimuth(max_order)
        logger.debug(f"Built spherical harmonics table up to order {max_order}: "
                     f"elevation {self.elevation.shape}, azimuth {self.azimuth.shape}")

    @staticmethod
    def _build_elevation(max_order: int) -> np.ndarray:
        elevations = np.radians(np.arange(ELEVATION_TABLE_SIZE) - 90.0)
        table = np.zeros((ELEVATION_TABLE_SIZE, elevation_term_count(max_order)))

        for l in range(1, max_order + 1):
            for m in range(l + 1):
                table[:, elevation_term_index(l, m)] = legendre_elevation_factor(l, m, elevations)

        table.setflags(write=False)
        return table

    @staticmethod
    def _build_azimuth(max_order: int) -> np.ndarray:
        azimuths = np.radians(np.arange(AZIMUTH_TABLE_SIZE, dtype=float))
        table = np.zeros((AZIMUTH_TABLE_SIZE, 2 * max_order))

        for m in range(1, max_order + 1):
            table[:, azimuth_term_index(-m, max_order)] = np.sin(m * azimuths)
            table[:, azimuth_term_index(m, max_order)] = np.cos(m * azimuths)

        table.setflags(write=False)
        return table

    def elevation_factor(self, elevation_index: int, term: int) -> float:
        """Elevation factor at table row elevation_index (elevation + 90) and term column."""
        return self.elevation[elevation_index, term]

    def azimuth_factor(self, azimuth_index: int, term: int) -> float:
        """Azimuth factor at table row azimuth_index (degrees in [0, 360)) and term column."""
        return self.azimuth[azimuth_index, term]


class MaxReWeightTable:
    """
    Per-degree source widening weights indexed by spread.

    Despite the max-rE name, the coefficients are not the max-rE decoder
    weights. They come from a diffusion kernel on the sphere,
    exp(-l(l+1)σ²/2) with σ half the spread in radians (see
    math_utils.spread_weights). The kernel is 1 at spread 0 and never
    increases with spread or degree.

    Attributes:
        max_order: Highest degree covered by the table
        weights: Array of shape (360, max_order); column l-1 holds degree l
    """

    def __init__(self, max_order: int = MAX_ORDER):
        self.max_order = max_order
        self.weights = spread_weights(np.arange(SPREAD_TABLE_SIZE), max_order)
        self.weights.setflags(write=False)
        logger.debug(f"Built spread weight table up to order {max_order}: {self.weights.shape}")

    def weight(self, spread_index: int, degree: int) -> float:
        """
        Weight for a degree at a spread index.

        Degree 0 is always 1: the omnidirectional component is never attenuated.
        """
        if degree == 0:
            return 1.0
        return self.weights[spread_index, degree - 1]


# Process-wide shared tables
SPHERICAL_HARMONICS = SphericalHarmonicsTable()
MAX_RE_WEIGHTS = MaxReWeightTable()
