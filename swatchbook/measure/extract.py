# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""
Main palette generation API.

This is the primary entry point for Swatchbook: load pixels, optionally
scale down and crop to a region, quantize, and score targets.
"""

from __future__ import annotations

import io
import logging
import math
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageCms

from swatchbook.schema import Palette, PaletteConfig, Region
from swatchbook.measure.quantizer import ColorCutQuantizer
from swatchbook.measure.scoring import build_palette

logger = logging.getLogger(__name__)


ImageInput = Union[str, Path, Image.Image, NDArray[np.integer]]

_PACKED_DTYPES = (np.dtype(np.int32), np.dtype(np.uint32), np.dtype(np.int64))


def generate(
    image: ImageInput,
    *,
    config: Optional[PaletteConfig] = None,
) -> Palette:
    """
    Generate a palette from an image.

    Args:
        image: One of:
            - Path to an image file (str or Path). Embedded ICC profiles are
              converted to sRGB.
            - PIL Image, converted to sRGB the same way
            - NumPy array of shape (H, W, 3) or (H, W, 4) with uint8 sRGB(A)
            - NumPy array of shape (H, W): uint8 grayscale, or packed
              ARGB values (int32, uint32 or int64)
        config: Generation settings (defaults if None)

    Returns:
        Palette with swatches, per-target selections and the dominant swatch

    Example:
        >>> from swatchbook import generate
        >>> palette = generate("photo.jpg")
        >>> palette.vibrant_swatch.hex
        '#D8A838'
    """
    pixels = _load_image(image)
    return _generate(pixels, config or PaletteConfig())


def generate_from_pixels(
    pixels: Union[Sequence[int], NDArray[np.integer]],
    width: int,
    height: int,
    *,
    config: Optional[PaletteConfig] = None,
) -> Palette:
    """
    Generate a palette from a flat buffer of packed ARGB pixels.

    Args:
        pixels: Row-major ARGB values, ``width * height`` of them
        width: Image width in pixels
        height: Image height in pixels
        config: Generation settings (defaults if None)

    Raises:
        ValueError: If the buffer is empty or does not match the dimensions
    """
    if pixels is None:
        raise ValueError("Pixel buffer is not valid")
    flat = np.asarray(pixels).astype(np.int64) & 0xFFFFFFFF
    if flat.ndim != 1 or flat.size == 0:
        raise ValueError(f"Expected a non-empty flat pixel buffer, got shape {flat.shape}")
    if width < 1 or height < 1 or flat.size != width * height:
        raise ValueError(
            f"Pixel buffer of {flat.size} values does not match {width}x{height}"
        )
    return _generate(flat.astype(np.uint32).reshape(height, width), config or PaletteConfig())


def _generate(argb: NDArray[np.uint32], config: PaletteConfig) -> Palette:
    height, width = argb.shape

    # Validate the region against the original image before any work
    region = config.region.intersect(width, height) if config.region is not None else None

    scaled = _scale_down(argb, config)
    if scaled.shape != argb.shape and region is not None:
        region = _scale_region(region, scale=scaled.shape[1] / width, width=scaled.shape[1], height=scaled.shape[0])

    if region is not None:
        scaled = scaled[region.top:region.bottom, region.left:region.right]

    quantizer = ColorCutQuantizer(
        scaled.reshape(-1),
        config.max_colors,
        config.filters,
    )
    swatches = quantizer.quantized_colors
    logger.debug("Quantized %dx%d pixels to %d swatches", scaled.shape[1], scaled.shape[0], len(swatches))

    return build_palette(swatches, config.targets)


# =============================================================================
# Image loading
# =============================================================================


def _load_image(image: ImageInput) -> NDArray[np.uint32]:
    """
    Load image from file, PIL image or array.

    Returns:
        (H, W) array of packed ARGB values
    """
    if isinstance(image, (str, Path)):
        with Image.open(image) as img:
            img.load()
            return _pil_to_argb(_to_srgb(img))

    if isinstance(image, Image.Image):
        return _pil_to_argb(_to_srgb(image))

    if isinstance(image, np.ndarray):
        if image.size == 0:
            raise ValueError("Image is empty")

        if image.ndim == 2:
            if image.dtype == np.uint8:
                # Grayscale
                return _pack_argb(np.repeat(image[..., None], 3, axis=-1))
            if image.dtype not in _PACKED_DTYPES:
                raise ValueError(
                    f"Expected uint8 grayscale or packed ARGB integer array "
                    f"(int32, uint32, int64), got {image.dtype}"
                )
            return (image.astype(np.int64) & 0xFFFFFFFF).astype(np.uint32)

        if image.ndim != 3 or image.shape[2] not in (3, 4):
            raise ValueError(
                f"Expected (H, W), (H, W, 3) or (H, W, 4) array, got shape {image.shape}"
            )
        if image.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {image.dtype}")
        return _pack_argb(image)

    raise TypeError(
        f"Expected file path, PIL image or numpy array, got {type(image)}"
    )


def _to_srgb(img: Image.Image) -> Image.Image:
    """Convert to sRGB through the embedded ICC profile, if any."""
    if "icc_profile" in img.info:
        embedded_profile = ImageCms.ImageCmsProfile(io.BytesIO(img.info["icc_profile"]))
        srgb_profile = ImageCms.createProfile("sRGB")
        if img.mode not in ("RGB", "CMYK", "L"):
            img = img.convert("RGB")
        img = ImageCms.profileToProfile(
            img, embedded_profile, srgb_profile, outputMode="RGB"
        )
    return img


def _pil_to_argb(img: Image.Image) -> NDArray[np.uint32]:
    if img.mode not in ("RGB", "RGBA"):
        img = img.convert("RGBA")
    return _pack_argb(np.array(img, dtype=np.uint8))


def _pack_argb(pixels: NDArray[np.uint8]) -> NDArray[np.uint32]:
    """Pack (H, W, 3|4) uint8 pixels into (H, W) ARGB. Missing alpha is opaque."""
    channels = pixels.astype(np.uint32)
    if pixels.shape[2] == 4:
        a = channels[..., 3]
    else:
        a = np.full(pixels.shape[:2], 0xFF, dtype=np.uint32)
    return (a << 24) | (channels[..., 0] << 16) | (channels[..., 1] << 8) | channels[..., 2]


def _unpack_argb(argb: NDArray[np.uint32]) -> NDArray[np.uint8]:
    """(H, W) ARGB → (H, W, 4) RGBA uint8."""
    argb = argb.astype(np.uint32)
    return np.stack(
        [(argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF, (argb >> 24) & 0xFF],
        axis=-1,
    ).astype(np.uint8)


# =============================================================================
# Resizing
# =============================================================================


def _scale_ratio(width: int, height: int, config: PaletteConfig) -> Optional[float]:
    """Scale factor to apply, or None if the image is small enough."""
    if config.resize_area is not None:
        area = width * height
        if area > config.resize_area:
            return math.sqrt(config.resize_area / area)
    elif config.resize_max_dimension is not None:
        max_dimension = max(width, height)
        if max_dimension > config.resize_max_dimension:
            return config.resize_max_dimension / max_dimension
    return None


def _scale_down(argb: NDArray[np.uint32], config: PaletteConfig) -> NDArray[np.uint32]:
    """Downsample with a box filter so every source pixel contributes equally."""
    height, width = argb.shape
    ratio = _scale_ratio(width, height, config)
    if ratio is None:
        return argb

    new_width = max(1, math.ceil(width * ratio))
    new_height = max(1, math.ceil(height * ratio))
    logger.debug("Resizing %dx%d -> %dx%d", width, height, new_width, new_height)

    img = Image.fromarray(_unpack_argb(argb))
    img = img.resize((new_width, new_height), Image.Resampling.BOX)
    return _pack_argb(np.array(img, dtype=np.uint8))


def _scale_region(region: Region, scale: float, width: int, height: int) -> Region:
    """Map a region onto the scaled image, clipped to its bounds."""
    left = math.floor(region.left * scale)
    top = math.floor(region.top * scale)
    region_width = min(math.ceil(region.width * scale), width)
    region_height = min(math.ceil(region.height * scale), height)
    return Region(left, top, left + max(1, region_width), top + max(1, region_height)).intersect(width, height)
