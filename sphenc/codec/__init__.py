"""
Directional Ambisonic Encoder Package

Table-driven computation of per-channel gains that place a mono source at a
direction and width in an ambisonic (ACN/SN3D) sound field.
"""

from .config import MAX_ORDER, EncoderConfig
from .encoder import DirectionalEncoder, Direction, sanitize_direction, validate_ambisonic_order
from .encoders import convert_to_spherical, direction_from_position, encode_mono_source
from .tables import SPHERICAL_HARMONICS, MAX_RE_WEIGHTS, SphericalHarmonicsTable, MaxReWeightTable
from .math_utils import real_spherical_harmonic, acn_index, channel_count

__version__ = '0.1.0'
