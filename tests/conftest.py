"""
Pytest configuration file for encoder tests.
"""

import pytest
import numpy as np
from sphenc.codec.config import EncoderConfig, MAX_ORDER
from sphenc.codec.encoder import DirectionalEncoder


@pytest.fixture
def test_config():
    """Return a test configuration with predefined settings."""
    return EncoderConfig(order=2, azimuth=45.0, elevation=10.0, width=30.0)


@pytest.fixture
def first_order_encoder():
    """A first-order encoder facing front."""
    return DirectionalEncoder(order=1)


@pytest.fixture
def max_order_encoder():
    """An encoder at the highest supported order."""
    return DirectionalEncoder(order=MAX_ORDER)


@pytest.fixture
def test_audio_mono():
    """Create a simple mono test signal."""
    # Create a 0.1-second sine wave at 440 Hz
    sr = 44100
    t = np.linspace(0, 0.1, sr // 10)
    audio = 0.5 * np.sin(2 * np.pi * 440 * t)
    return audio
