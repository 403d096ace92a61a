"""
sphenc - spherical harmonic directional encoder.
"""
