"""
General Utility Definitions

Type aliases shared across the encoder package.

See Also:
    - config: For centralized configuration management
    - math_utils: For mathematical utility functions
"""

from typing import Tuple

import numpy as np

# Type aliases for improved readability
CartesianCoord = Tuple[float, float, float]  # (x, y, z) in meters, x = left, y = up, z = front
SphericalCoord = Tuple[float, float, float]  # (azimuth, elevation, distance) in degrees/meters
GainVector = np.ndarray  # Shape: ((order+1)²,), indexed by ACN
MonoSignal = np.ndarray  # Shape: (n_samples,)
AmbisonicSignal = np.ndarray  # Shape: (n_channels, n_samples)
