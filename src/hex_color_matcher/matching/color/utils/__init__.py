"""
utils package.
=============

Does: Provide color-space conversion and distance helpers shared by the
      cache, the ranking pipeline and hex comparison.
"""

from .color_space import (
    BLACK,
    LAB,
    RGB,
    XYZ,
    absolute_distance,
    canonical_hex,
    delta_e,
    delta_e_hex,
    hex_to_lab,
    hex_to_rgb,
    is_dark,
    is_valid_hex,
    rgb_to_hex,
    rgb_to_xyz,
    xyz_to_lab,
)

__all__ = [
    "RGB",
    "XYZ",
    "LAB",
    "BLACK",
    "canonical_hex",
    "is_valid_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_xyz",
    "xyz_to_lab",
    "hex_to_lab",
    "delta_e",
    "delta_e_hex",
    "absolute_distance",
    "is_dark",
]

__docformat__ = "google"
