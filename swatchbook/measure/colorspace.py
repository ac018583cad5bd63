# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""
Color space conversions and contrast math.

Conversion chains:
- sRGB ↔ HSL (hue in degrees, saturation/lightness in [0, 1])
- sRGB → Linear RGB → CIE XYZ (D65) → CIE Lab, and back

Colors are passed around as packed 32-bit ARGB integers (0xAARRGGBB).
Array helpers are vectorized NumPy; scalar helpers return plain Python
floats/ints so results are hashable and deterministic.

References:
- sRGB transfer function: IEC 61966-2-1
- WCAG 2.x relative luminance and contrast ratio
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Packed ARGB helpers
# =============================================================================

BLACK = 0xFF000000
WHITE = 0xFFFFFFFF


def alpha(color: int) -> int:
    return (color >> 24) & 0xFF


def red(color: int) -> int:
    return (color >> 16) & 0xFF


def green(color: int) -> int:
    return (color >> 8) & 0xFF


def blue(color: int) -> int:
    return color & 0xFF


def argb(a: int, r: int, g: int, b: int) -> int:
    """Pack four 8-bit channels into a single ARGB integer."""
    return ((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def rgb(r: int, g: int, b: int) -> int:
    """Pack an opaque color."""
    return argb(0xFF, r, g, b)


def set_alpha(color: int, a: int) -> int:
    """Return ``color`` with its alpha channel replaced by ``a``."""
    if not 0 <= a <= 255:
        raise ValueError(f"Alpha must be 0-255, got {a}")
    return (color & 0x00FFFFFF) | (a << 24)


def to_hex(color: int) -> str:
    """Hex string like ``#3941C8`` (alpha is dropped)."""
    return f"#{red(color):02X}{green(color):02X}{blue(color):02X}"


def _round(value: float) -> int:
    # Half-up rounding; Python's round() is half-to-even.
    return int(math.floor(value + 0.5))


def _constrain(value, lo, hi):
    return lo if value < lo else hi if value > hi else value


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert 8-bit RGB to HSL.

    Returns:
        (h, s, l) with h in [0, 360), s and l in [0, 1].
        Achromatic colors (r == g == b) have h = s = 0.
    """
    rf = r / 255.0
    gf = g / 255.0
    bf = b / 255.0

    max_c = max(rf, gf, bf)
    min_c = min(rf, gf, bf)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if max_c == min_c:
        hue = saturation = 0.0
    else:
        if max_c == rf:
            hue = ((gf - bf) / delta) % 6.0
        elif max_c == gf:
            hue = ((bf - rf) / delta) + 2.0
        else:
            hue = ((rf - gf) / delta) + 4.0
        saturation = delta / (1.0 - abs(2.0 * lightness - 1.0))

    hue = (hue * 60.0) % 360.0

    return (
        _constrain(hue, 0.0, 360.0),
        _constrain(saturation, 0.0, 1.0),
        _constrain(lightness, 0.0, 1.0),
    )


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """Inverse of :func:`rgb_to_hsl`. Channels are rounded and clamped to [0, 255]."""
    c = (1.0 - abs(2.0 * l - 1.0)) * s
    m = l - 0.5 * c
    x = c * (1.0 - abs((h / 60.0 % 2.0) - 1.0))

    segment = int(h) // 60

    if segment == 0:
        rf, gf, bf = c + m, x + m, m
    elif segment == 1:
        rf, gf, bf = x + m, c + m, m
    elif segment == 2:
        rf, gf, bf = m, c + m, x + m
    elif segment == 3:
        rf, gf, bf = m, x + m, c + m
    elif segment == 4:
        rf, gf, bf = x + m, m, c + m
    else:
        # segments 5 and 6 (h == 360)
        rf, gf, bf = c + m, m, x + m

    return (
        _constrain(_round(255.0 * rf), 0, 255),
        _constrain(_round(255.0 * gf), 0, 255),
        _constrain(_round(255.0 * bf), 0, 255),
    )


def color_to_hsl(color: int) -> tuple[float, float, float]:
    return rgb_to_hsl(red(color), green(color), blue(color))


def hsl_to_color(hsl: tuple[float, float, float]) -> int:
    """Convert HSL to an opaque packed color."""
    return rgb(*hsl_to_rgb(*hsl))


def rgb_array_to_hsl(rgb_pixels: NDArray[np.integer]) -> NDArray[np.float64]:
    """
    Vectorized :func:`rgb_to_hsl`.

    Args:
        rgb_pixels: Array of shape (..., 3) with 8-bit RGB values

    Returns:
        Array of shape (..., 3) with (h, s, l) values
    """
    rgbf = np.asarray(rgb_pixels, dtype=np.float64) / 255.0
    rf = rgbf[..., 0]
    gf = rgbf[..., 1]
    bf = rgbf[..., 2]

    max_c = rgbf.max(axis=-1)
    min_c = rgbf.min(axis=-1)
    delta = max_c - min_c
    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)

    lightness = (max_c + min_c) / 2.0

    hue = np.where(
        max_c == rf,
        ((gf - bf) / safe_delta) % 6.0,
        np.where(
            max_c == gf,
            ((bf - rf) / safe_delta) + 2.0,
            ((rf - gf) / safe_delta) + 4.0,
        ),
    )
    hue = np.where(chromatic, (hue * 60.0) % 360.0, 0.0)

    denom = 1.0 - np.abs(2.0 * lightness - 1.0)
    saturation = np.where(
        chromatic,
        delta / np.where(denom > 0, denom, 1.0),
        0.0,
    )

    return np.stack(
        [
            np.clip(hue, 0.0, 360.0),
            np.clip(saturation, 0.0, 1.0),
            np.clip(lightness, 0.0, 1.0),
        ],
        axis=-1,
    )


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    - For values < 0.04045: linear/12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb < 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """Inverse of srgb_to_linear, clipped to [0, 1]."""
    linear = np.maximum(np.asarray(linear, dtype=np.float64), 0.0)
    srgb = np.where(
        linear > 0.0031308,
        1.055 * np.power(linear, 1.0 / 2.4) - 0.055,
        linear * 12.92,
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ CIE XYZ (D65)
# =============================================================================

# Rows give X, Y, Z in percent for unit linear R, G, B.
_RGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
], dtype=np.float64)

_XYZ_TO_RGB = np.array([
    [3.2406, -1.5372, -0.4986],
    [-0.9689, 1.8758, 0.0415],
    [0.0557, -0.2040, 1.0570],
], dtype=np.float64)

# D65 reference white
XYZ_WHITE_REFERENCE = (95.047, 100.0, 108.883)

# (6/29)^3 and (29/3)^3
XYZ_EPSILON = 0.008856
XYZ_KAPPA = 903.3


def rgb_to_xyz(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert 8-bit sRGB to CIE XYZ under D65.

    Returns:
        (x, y, z) scaled so that white has y = 100
    """
    linear = srgb_to_linear(np.array([r, g, b], dtype=np.float64) / 255.0)
    x, y, z = 100.0 * (_RGB_TO_XYZ @ linear)
    return float(x), float(y), float(z)


def xyz_to_rgb(x: float, y: float, z: float) -> tuple[int, int, int]:
    """Convert CIE XYZ (D65, y in [0, 100]) to 8-bit sRGB, clamped to [0, 255]."""
    linear = _XYZ_TO_RGB @ (np.array([x, y, z], dtype=np.float64) / 100.0)
    srgb = linear_to_srgb(linear)
    r, g, b = (_constrain(_round(float(v) * 255.0), 0, 255) for v in srgb)
    return r, g, b


def color_to_xyz(color: int) -> tuple[float, float, float]:
    return rgb_to_xyz(red(color), green(color), blue(color))


def xyz_to_color(x: float, y: float, z: float) -> int:
    return rgb(*xyz_to_rgb(x, y, z))


# =============================================================================
# CIE XYZ ↔ CIE Lab
# =============================================================================


def _pivot_xyz_component(component: float) -> float:
    if component > XYZ_EPSILON:
        return component ** (1.0 / 3.0)
    return (XYZ_KAPPA * component + 16.0) / 116.0


def xyz_to_lab(x: float, y: float, z: float) -> tuple[float, float, float]:
    """
    Convert CIE XYZ to CIE 1976 Lab, referenced to the D65 white point.

    Returns:
        (L, a, b) with L in [0, 100]
    """
    xn, yn, zn = XYZ_WHITE_REFERENCE
    fx = _pivot_xyz_component(x / xn)
    fy = _pivot_xyz_component(y / yn)
    fz = _pivot_xyz_component(z / zn)
    return (
        max(0.0, 116.0 * fy - 16.0),
        500.0 * (fx - fy),
        200.0 * (fy - fz),
    )


def lab_to_xyz(l: float, a: float, b: float) -> tuple[float, float, float]:
    """Inverse of :func:`xyz_to_lab`."""
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0

    tmp = fx ** 3
    xr = tmp if tmp > XYZ_EPSILON else (116.0 * fx - 16.0) / XYZ_KAPPA
    yr = fy ** 3 if l > XYZ_KAPPA * XYZ_EPSILON else l / XYZ_KAPPA
    tmp = fz ** 3
    zr = tmp if tmp > XYZ_EPSILON else (116.0 * fz - 16.0) / XYZ_KAPPA

    xn, yn, zn = XYZ_WHITE_REFERENCE
    return xr * xn, yr * yn, zr * zn


def rgb_to_lab(r: int, g: int, b: int) -> tuple[float, float, float]:
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def lab_to_rgb(l: float, a: float, b: float) -> tuple[int, int, int]:
    return xyz_to_rgb(*lab_to_xyz(l, a, b))


def color_to_lab(color: int) -> tuple[float, float, float]:
    return rgb_to_lab(red(color), green(color), blue(color))


def lab_to_color(l: float, a: float, b: float) -> int:
    return rgb(*lab_to_rgb(l, a, b))


def distance_euclidean(
    lab1: tuple[float, float, float],
    lab2: tuple[float, float, float],
) -> float:
    """Euclidean distance between two Lab colors (CIE76 ΔE)."""
    return math.sqrt(sum((p - q) ** 2 for p, q in zip(lab1, lab2)))


# =============================================================================
# Blending
# =============================================================================


def circular_interpolate(a: float, b: float, f: float) -> float:
    """
    Interpolate between two hue angles along the shorter arc.

    Args:
        a: Start angle in degrees
        b: End angle in degrees
        f: Fraction in [0, 1]

    Returns:
        Angle in [0, 360)
    """
    if abs(b - a) > 180.0:
        if b > a:
            a += 360.0
        else:
            b += 360.0
    return (a + (b - a) * f) % 360.0


def blend_argb(color1: int, color2: int, ratio: float) -> int:
    """Blend two packed colors channel by channel (ratio 0 → color1)."""
    inverse = 1.0 - ratio
    return argb(
        int(alpha(color1) * inverse + alpha(color2) * ratio),
        int(red(color1) * inverse + red(color2) * ratio),
        int(green(color1) * inverse + green(color2) * ratio),
        int(blue(color1) * inverse + blue(color2) * ratio),
    )


def blend_hsl(
    hsl1: tuple[float, float, float],
    hsl2: tuple[float, float, float],
    ratio: float,
) -> tuple[float, float, float]:
    """Blend in HSL; hue takes the shorter way around the wheel."""
    inverse = 1.0 - ratio
    return (
        circular_interpolate(hsl1[0], hsl2[0], ratio),
        hsl1[1] * inverse + hsl2[1] * ratio,
        hsl1[2] * inverse + hsl2[2] * ratio,
    )


def blend_lab(
    lab1: tuple[float, float, float],
    lab2: tuple[float, float, float],
    ratio: float,
) -> tuple[float, float, float]:
    inverse = 1.0 - ratio
    return tuple(p * inverse + q * ratio for p, q in zip(lab1, lab2))


# =============================================================================
# Compositing and contrast (WCAG)
# =============================================================================


def _composite_alpha(foreground_alpha: int, background_alpha: int) -> int:
    return 0xFF - ((0xFF - background_alpha) * (0xFF - foreground_alpha) // 0xFF)


def _composite_component(fg_c: int, fg_a: int, bg_c: int, bg_a: int, a: int) -> int:
    if a == 0:
        return 0
    return ((0xFF * fg_c * fg_a) + (bg_c * bg_a * (0xFF - fg_a))) // (a * 0xFF)


def composite_colors(foreground: int, background: int) -> int:
    """Composite ``foreground`` over ``background`` (integer source-over)."""
    bg_a = alpha(background)
    fg_a = alpha(foreground)
    a = _composite_alpha(fg_a, bg_a)
    return argb(
        a,
        _composite_component(red(foreground), fg_a, red(background), bg_a, a),
        _composite_component(green(foreground), fg_a, green(background), bg_a, a),
        _composite_component(blue(foreground), fg_a, blue(background), bg_a, a),
    )


def calculate_luminance(color: int) -> float:
    """Relative luminance in [0, 1] (Y of XYZ, rescaled)."""
    return color_to_xyz(color)[1] / 100.0


def contrast_ratio(foreground: int, background: int) -> float:
    """
    WCAG contrast ratio between two colors, always >= 1.

    A translucent foreground is composited over the background first.

    Raises:
        ValueError: If the background is not fully opaque
    """
    if alpha(background) != 255:
        raise ValueError(
            f"Background can not be translucent: {background:#010x}"
        )
    if alpha(foreground) < 255:
        foreground = composite_colors(foreground, background)

    luminance1 = calculate_luminance(foreground) + 0.05
    luminance2 = calculate_luminance(background) + 0.05

    return max(luminance1, luminance2) / min(luminance1, luminance2)


def minimum_alpha_for_contrast(
    foreground: int,
    background: int,
    min_contrast_ratio: float,
) -> int:
    """
    Smallest foreground alpha that still meets ``min_contrast_ratio``.

    Binary search over [0, 255], compositing the foreground over the
    opaque background at each step.

    Returns:
        Alpha in [0, 255], or -1 if even a fully opaque foreground
        falls short of the requested ratio.

    Raises:
        ValueError: If the background is not fully opaque
    """
    if alpha(background) != 255:
        raise ValueError(
            f"Background can not be translucent: {background:#010x}"
        )

    if contrast_ratio(set_alpha(foreground, 255), background) < min_contrast_ratio:
        return -1

    iterations = 0
    min_alpha = 0
    max_alpha = 255

    while iterations <= 10 and (max_alpha - min_alpha) > 1:
        test_alpha = (min_alpha + max_alpha) // 2
        if contrast_ratio(set_alpha(foreground, test_alpha), background) < min_contrast_ratio:
            min_alpha = test_alpha
        else:
            max_alpha = test_alpha
        iterations += 1

    # Conservatively use the upper bound of the final interval
    return max_alpha
