"""
Encoding and Source Placement Functions

This module contains helpers for placing a mono source relative to a
listener and a one-shot function that encodes a mono buffer into
ambisonics with a DirectionalEncoder.
"""

import math
from typing import Optional

import numpy as np

from .config import DEFAULT_AMBISONIC_ORDER, DEFAULT_SOURCE_WIDTH
from .encoder import DirectionalEncoder, Direction, sanitize_direction
from .utils import CartesianCoord, SphericalCoord, MonoSignal, AmbisonicSignal


def convert_to_spherical(cartesian: CartesianCoord) -> SphericalCoord:
    """
    Convert Cartesian coordinates (x, y, z) to spherical coordinates (azimuth, elevation, distance).

    Uses the convention:
    - Azimuth: angle in the x-z plane in degrees (0 = front, 90 = left, 180 = back, -90 = right)
    - Elevation: angle from the x-z plane in degrees (-90 = down, 0 = horizon, 90 = up)
    - Distance: distance from origin

    Args:
        cartesian: (x, y, z) coordinates, x = left, y = up, z = front

    Returns:
        (azimuth, elevation, distance); the origin maps to (0, 0, 0)
    """
    x, y, z = cartesian

    distance = math.sqrt(x*x + y*y + z*z)

    # Handle the origin
    if distance < 1e-10:
        return (0.0, 0.0, 0.0)

    elevation = math.degrees(math.asin(y / distance))
    azimuth = math.degrees(math.atan2(x, z))

    return (azimuth, elevation, distance)


def direction_from_position(source: CartesianCoord,
                            listener: CartesianCoord = (0.0, 0.0, 0.0)) -> Direction:
    """
    Direction of a source as seen from a listener.

    A source at the listener's position has no direction and yields the
    default (front, level).

    Args:
        source: Source position (x, y, z) in meters
        listener: Listener position (x, y, z) in meters

    Returns:
        Direction in degrees
    """
    dx, dy, dz = (s - l for s, l in zip(source, listener))
    azimuth, elevation, distance = convert_to_spherical((dx, dy, dz))
    if distance == 0.0:
        return sanitize_direction()
    return Direction(azimuth, elevation)


def encode_mono_source(audio: MonoSignal, azimuth: Optional[float], elevation: Optional[float],
                       width: Optional[float] = DEFAULT_SOURCE_WIDTH,
                       order: Optional[int] = DEFAULT_AMBISONIC_ORDER) -> AmbisonicSignal:
    """
    Encode a mono audio source into ambisonic signals.

    Args:
        audio: Mono audio signal, shape (n_samples,)
        azimuth: Azimuth in degrees
        elevation: Elevation in degrees
        width: Apparent source width in degrees
        order: Ambisonic order (clamped to the supported range)

    Returns:
        Ambisonic signals, shape ((order+1)², n_samples)
    """
    encoder = DirectionalEncoder(order=order, azimuth=azimuth, elevation=elevation, width=width)
    return encoder.process(np.asarray(audio, dtype=float))
