"""
Configuration Management Module

This module provides centralized configuration for the directional encoder,
including table dimensions, default source parameters, and a serializable
configuration dataclass.
"""

from typing import Dict, Any
from dataclasses import dataclass
import numbers
import json

from .exceptions import ConfigurationError


# =====================================================================================
# Constants
# =====================================================================================

# Highest ambisonic order covered by the precomputed harmonics table
MAX_ORDER = 3
DEFAULT_AMBISONIC_ORDER = 1

# Table dimensions (1-degree resolution)
AZIMUTH_TABLE_SIZE = 360  # azimuth 0..359
ELEVATION_TABLE_SIZE = 181  # elevation -90..90, stored at index elevation + 90
SPREAD_TABLE_SIZE = 360  # spread 0..359

# Elevation limits in degrees
MIN_ELEVATION = -90.0
MAX_ELEVATION = 90.0

# Default source direction (facing forward, level) and width
DEFAULT_AZIMUTH = 0.0
DEFAULT_ELEVATION = 0.0
DEFAULT_SOURCE_WIDTH = 0.0


# =====================================================================================
# Configuration Classes
# =====================================================================================

@dataclass
class EncoderConfig:
    """Initial parameters for a directional encoder"""

    order: int = DEFAULT_AMBISONIC_ORDER

    # Source direction in degrees
    azimuth: float = DEFAULT_AZIMUTH
    elevation: float = DEFAULT_ELEVATION

    # Apparent source width in degrees (0 = point source)
    width: float = DEFAULT_SOURCE_WIDTH

    def __post_init__(self):
        """Validate configuration after initialization"""
        # Orders above MAX_ORDER are accepted here; the encoder clamps them
        if isinstance(self.order, bool) or not isinstance(self.order, numbers.Integral):
            raise ConfigurationError(f"Ambisonic order must be an integer, got {self.order!r}")

        if self.order < 0:
            raise ConfigurationError(f"Ambisonic order must be non-negative, got {self.order}")

        for name in ('azimuth', 'elevation', 'width'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ConfigurationError(f"{name} must be a number in degrees, got {value!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for serialization"""
        return {
            'order': int(self.order),
            'azimuth': float(self.azimuth),
            'elevation': float(self.elevation),
            'width': float(self.width),
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'EncoderConfig':
        """Create configuration from dictionary"""
        try:
            return cls(**config_dict)
        except TypeError as e:
            raise ConfigurationError(f"Invalid encoder configuration: {e}") from e

    def save(self, file_path: str) -> None:
        """Save configuration to file"""
        with open(file_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, file_path: str) -> 'EncoderConfig':
        """Load configuration from file"""
        with open(file_path, 'r') as f:
            try:
                config_dict = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Malformed configuration file {file_path}: {e}") from e

        if not isinstance(config_dict, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a JSON object")

        return cls.from_dict(config_dict)


# Create a default configuration
default_config = EncoderConfig()
