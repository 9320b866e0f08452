# grayops/image_ops.py
from typing import List

from .raster import Color, Raster, MODE_GRAY, MODE_RGB


def clamp(v: int) -> int:
    return 0 if v < 0 else 255 if v > 255 else v


def luma(r: int, g: int, b: int) -> int:
    """
    Luminancja 0.299R + 0.587G + 0.114B obcięta w dół (jak rzutowanie na int).
    Liczona w stałym przecinku (wagi w tysięcznych), więc biały daje dokładnie 255.
    """
    return (299 * r + 587 * g + 114 * b) // 1000


def to_grayscale(raster: Raster) -> Raster:
    """Skala szarości – ważona luminancja, wynik jednokanałowy (tryb "L")."""
    if raster.is_gray:
        return raster.copy()
    out: List[int] = [luma(r, g, b) for r, g, b in raster.pixels]
    return raster.with_pixels(out, MODE_GRAY)


def gray_to_rgb(raster: Raster) -> Raster:
    """Powielenie jasności do trzech kanałów (R=G=B)."""
    if not raster.is_gray:
        return raster.copy()
    out: List[Color] = [(v, v, v) for v in raster.pixels]
    return raster.with_pixels(out, MODE_RGB)
