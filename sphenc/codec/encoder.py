"""
Directional Encoder

This module contains the DirectionalEncoder, which turns a source direction
and width into one gain per ambisonic channel (ACN order, SN3D), using the
precomputed tables in the tables module.

The encoder sits in a real-time audio path, so it never raises on numeric
input. Orders are clamped to the supported range (with a logged warning),
missing or NaN directions fall back to facing forward and level, and widths
are clamped to the spread table.
"""

import logging
import math
from typing import NamedTuple, Optional

import numpy as np

from .config import (
    MAX_ORDER, DEFAULT_AMBISONIC_ORDER, DEFAULT_AZIMUTH, DEFAULT_ELEVATION,
    DEFAULT_SOURCE_WIDTH, MIN_ELEVATION, MAX_ELEVATION, AZIMUTH_TABLE_SIZE,
    SPREAD_TABLE_SIZE, EncoderConfig,
)
from .math_utils import channel_count
from .tables import SPHERICAL_HARMONICS, MAX_RE_WEIGHTS, elevation_term_index, azimuth_term_index
from .utils import GainVector, MonoSignal, AmbisonicSignal

# Set up logging
logger = logging.getLogger(__name__)


class Direction(NamedTuple):
    """Source direction in degrees."""
    azimuth: float
    elevation: float


def _round_index(value: float) -> int:
    # Half-up rounding, matching how the tables are sampled
    return int(math.floor(value + 0.5))


def _is_missing(value: Optional[float]) -> bool:
    return value is None or math.isnan(value)


def sanitize_direction(azimuth: Optional[float] = None,
                       elevation: Optional[float] = None) -> Direction:
    """
    Replace missing or NaN angles by the default direction.

    An infinite azimuth has no meaningful wrap-around and is treated as
    missing too. Out-of-range but finite values are returned unchanged; they
    are only clamped when converted to table indices.

    Examples:
        >>> sanitize_direction(float('nan'), 30.0)
        Direction(azimuth=0.0, elevation=30.0)
    """
    if _is_missing(azimuth) or math.isinf(azimuth):
        azimuth = DEFAULT_AZIMUTH
    if _is_missing(elevation):
        elevation = DEFAULT_ELEVATION
    return Direction(float(azimuth), float(elevation))


def azimuth_to_index(azimuth: float) -> int:
    """Azimuth table row for a finite azimuth in degrees, wrapped into [0, 360)."""
    return _round_index(azimuth) % AZIMUTH_TABLE_SIZE


def elevation_to_index(elevation: float) -> int:
    """Elevation table row for an elevation in degrees, clamped to [-90, 90] then shifted to [0, 180]."""
    clamped = min(max(elevation, MIN_ELEVATION), MAX_ELEVATION)
    return _round_index(clamped) - int(MIN_ELEVATION)


def width_to_spread_index(width: Optional[float]) -> int:
    """Spread table row for a width in degrees, clamped to [0, 359]; missing or NaN maps to 0."""
    if _is_missing(width):
        return 0
    clamped = min(max(width, 0.0), float(SPREAD_TABLE_SIZE - 1))
    return _round_index(clamped)


def validate_ambisonic_order(order: Optional[float]) -> int:
    """
    Clamp a requested ambisonic order to [0, MAX_ORDER].

    A warning is logged whenever the returned order differs from the request.
    Missing or NaN orders fall back to the default order.

    Args:
        order: Requested ambisonic order

    Returns:
        A usable integer order
    """
    if _is_missing(order):
        logger.warning(f"Invalid ambisonic order {order}, using default order {DEFAULT_AMBISONIC_ORDER}")
        return DEFAULT_AMBISONIC_ORDER

    if order > MAX_ORDER:
        logger.warning(f"Ambisonic order {order} exceeds the maximum supported order {MAX_ORDER}, "
                       f"clamping to {MAX_ORDER}")
        return MAX_ORDER

    if order < 0:
        logger.warning(f"Ambisonic order {order} is negative, clamping to 0")
        return 0

    validated = _round_index(order)
    if validated != order:
        logger.warning(f"Ambisonic order {order} is not an integer, using {validated}")
    return validated


class DirectionalEncoder:
    """
    Computes per-channel ambisonic gains for a mono source.

    The order is fixed at construction and the gain vector always has
    (order+1)² entries. Every call to set_direction or set_source_width
    recomputes the full vector in place; channel 0 (omnidirectional) is
    always 1.

    Instances are not thread-safe. Calls on one encoder must be serialized
    by the caller.

    Attributes:
        order: Ambisonic order after clamping
        num_channels: Number of ambisonic channels, (order+1)²
        azimuth: Last requested azimuth in degrees (unclamped)
        elevation: Last requested elevation in degrees (unclamped)
        spread_index: Current row of the spread weight table
    """

    def __init__(self, order: Optional[int] = DEFAULT_AMBISONIC_ORDER,
                 azimuth: Optional[float] = DEFAULT_AZIMUTH,
                 elevation: Optional[float] = DEFAULT_ELEVATION,
                 width: Optional[float] = DEFAULT_SOURCE_WIDTH):
        self.order = validate_ambisonic_order(order)
        self.num_channels = channel_count(self.order)

        self.azimuth = DEFAULT_AZIMUTH
        self.elevation = DEFAULT_ELEVATION
        self.spread_index = width_to_spread_index(width)

        self._gains = np.zeros(self.num_channels)
        self._gains[0] = 1.0

        self.set_direction(azimuth, elevation)

    @classmethod
    def from_config(cls, config: EncoderConfig) -> 'DirectionalEncoder':
        """Create an encoder from an EncoderConfig"""
        return cls(order=config.order, azimuth=config.azimuth,
                   elevation=config.elevation, width=config.width)

    @property
    def gains(self) -> GainVector:
        """Read-only view of the current gain vector, indexed by ACN."""
        view = self._gains.view()
        view.flags.writeable = False
        return view

    @property
    def direction(self) -> Direction:
        return Direction(self.azimuth, self.elevation)

    def set_direction(self, azimuth: Optional[float] = None,
                      elevation: Optional[float] = None) -> None:
        """
        Point the source at a direction and recompute all gains.

        Args:
            azimuth: Azimuth in degrees, any real value (wrapped); None/NaN means 0
            elevation: Elevation in degrees, any real value (clamped); None/NaN means 0
        """
        self.azimuth, self.elevation = sanitize_direction(azimuth, elevation)

        azimuth_index = azimuth_to_index(self.azimuth)
        elevation_index = elevation_to_index(self.elevation)

        gains = self._gains
        for l in range(1, self.order + 1):
            degree_weight = MAX_RE_WEIGHTS.weight(self.spread_index, l)

            for m in range(-l, l + 1):
                acn = l * l + l + m
                gain = SPHERICAL_HARMONICS.elevation_factor(elevation_index, elevation_term_index(l, m))
                if m != 0:
                    gain *= SPHERICAL_HARMONICS.azimuth_factor(azimuth_index, azimuth_term_index(m))
                gains[acn] = gain * degree_weight

    def set_source_width(self, width: Optional[float]) -> None:
        """
        Set the apparent source width in degrees and recompute all gains.

        Widths are clamped to [0, 359]; None/NaN behaves like 0.
        """
        self.spread_index = width_to_spread_index(width)
        self.set_direction(self.azimuth, self.elevation)

    def process(self, audio: MonoSignal) -> AmbisonicSignal:
        """
        Apply the current gains to a mono signal.

        Args:
            audio: Mono audio signal, shape (n_samples,)

        Returns:
            Ambisonic signals, shape ((order+1)², n_samples)

        Raises:
            ValueError: If audio is not one-dimensional
        """
        audio = np.asarray(audio, dtype=float)
        if audio.ndim != 1:
            raise ValueError(f"Mono audio must be one-dimensional, got shape {audio.shape}")
        return self._gains[:, np.newaxis] * audio
