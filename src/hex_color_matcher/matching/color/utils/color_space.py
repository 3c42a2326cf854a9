"""
color_space.py
==============

Does: Convert hex → sRGB → XYZ → CIE L*a*b* (D65) and compute distances
      (ΔE76 in Lab, Manhattan in RGB) plus a luminance darkness check.
Used By: LabCache, the ranking pipeline, hex comparison and the demo CLI.
Returns: RGB (webcolors.IntegerRGB), XYZ/LAB named tuples, distances.

Tier thresholds downstream assume exactly these white point, gamma and Lab
segment constants.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from webcolors import IntegerRGB, rgb_to_hex as _webcolors_rgb_to_hex

# Public surface
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

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = IntegerRGB


class XYZ(NamedTuple):
    x: float
    y: float
    z: float


class LAB(NamedTuple):
    L: float
    a: float
    b: float


BLACK = RGB(0, 0, 0)

_HEX6 = re.compile(r"[0-9A-F]{6}")

# D65 reference white, 0–100 scale
_XN, _YN, _ZN = 95.047, 100.0, 108.883


# =============================================================================
# 1) HEX PARSING
# =============================================================================

def canonical_hex(hexcode: str) -> str:
    """Does: Strip '#' and uppercase. No validation."""
    return hexcode.replace("#", "").upper()


def is_valid_hex(hexcode: str) -> bool:
    """Does: True iff the canonical form is exactly six hex digits."""
    return _HEX6.fullmatch(canonical_hex(hexcode)) is not None


def hex_to_rgb(hexcode: str) -> RGB:
    """
    Does: Parse a 6-digit hex (optional '#', any case) into RGB.
    Returns: BLACK for anything that is not six hex digits; never raises.
    """
    clean = canonical_hex(hexcode)
    if _HEX6.fullmatch(clean) is None:
        return BLACK
    return RGB(int(clean[0:2], 16), int(clean[2:4], 16), int(clean[4:6], 16))


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    """Does: Format RGB as uppercase 'RRGGBB' (no '#')."""
    return _webcolors_rgb_to_hex(tuple(rgb)).lstrip("#").upper()


# =============================================================================
# 2) COLOR SPACE CONVERSION
# =============================================================================

def _srgb_to_linear(v: float) -> float:
    v = v / 255.0
    return ((v + 0.055) / 1.055) ** 2.4 if v > 0.04045 else v / 12.92


def rgb_to_xyz(rgb: tuple[int, int, int]) -> XYZ:
    """Does: sRGB (0–255) → CIE XYZ scaled to 0–100."""
    r, g, b = (_srgb_to_linear(float(c)) for c in rgb)
    x = (r * 0.4124564 + g * 0.3575761 + b * 0.1804375) * 100
    y = (r * 0.2126729 + g * 0.7151522 + b * 0.0721750) * 100
    z = (r * 0.0193339 + g * 0.1191920 + b * 0.9503041) * 100
    return XYZ(x, y, z)


def _f_lab(t: float) -> float:
    return t ** (1.0 / 3.0) if t > 0.008856 else (7.787 * t + 16.0 / 116.0)


def xyz_to_lab(xyz: XYZ) -> LAB:
    """Does: CIE XYZ (0–100) → L*a*b* relative to D65."""
    fx = _f_lab(xyz.x / _XN)
    fy = _f_lab(xyz.y / _YN)
    fz = _f_lab(xyz.z / _ZN)
    return LAB(116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def hex_to_lab(hexcode: str) -> LAB:
    """Does: hex → RGB → XYZ → LAB in one call."""
    return xyz_to_lab(rgb_to_xyz(hex_to_rgb(hexcode)))


# =============================================================================
# 3) DISTANCES
# =============================================================================

def delta_e(lab1: LAB, lab2: LAB) -> float:
    """
    Does: ΔE between two Lab colors.

    This is CIE76 (plain Euclidean distance in Lab), although older notes
    call it CIEDE2000. The tier bands are calibrated on CIE76 output.
    """
    return (
        (lab1[0] - lab2[0]) ** 2
        + (lab1[1] - lab2[1]) ** 2
        + (lab1[2] - lab2[2]) ** 2
    ) ** 0.5


def delta_e_hex(hex1: str, hex2: str) -> float:
    """Does: ΔE76 between two hex strings (uncached)."""
    return delta_e(hex_to_lab(hex1), hex_to_lab(hex2))


def absolute_distance(hex1: str, hex2: str) -> int:
    """Does: Manhattan distance in RGB. Display only, never used for ranking."""
    rgb1, rgb2 = hex_to_rgb(hex1), hex_to_rgb(hex2)
    return sum(abs(a - b) for a, b in zip(rgb1, rgb2))


def is_dark(hexcode: str) -> bool:
    """Does: True if perceived luminance is below 0.5 (pick light text on it)."""
    r, g, b = hex_to_rgb(hexcode)
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255 < 0.5
