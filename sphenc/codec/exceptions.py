"""
Custom Exceptions Module

This module defines the exception hierarchy for the encoder package.

The gain computation itself never raises for numeric input: out-of-range
orders, directions and widths are clamped or replaced by defaults. These
exceptions cover configuration handling and direct calls into the math
helpers with arguments outside their domain.
"""

class EncoderError(Exception):
    """Base exception class for all encoder errors."""
    pass


class ConfigurationError(EncoderError):
    """Error in encoder configuration."""
    pass


class MathError(EncoderError):
    """Error in mathematical calculations."""

    class DomainError(EncoderError):
        """Error due to input values outside the valid domain."""
        pass
