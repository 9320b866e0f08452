import logging
from typing import List, Tuple

from .errors import InvalidInputError
from .image_ops import clamp
from .raster import Raster

logger = logging.getLogger(__name__)


def _require_gray(raster: Raster):
    if not raster.is_gray:
        raise InvalidInputError(
            f"Oczekiwano obrazu w skali szarości (tryb L), jest {raster.mode}."
        )


def compute_histogram(raster: Raster) -> List[int]:
    """
    Zwraca histogram (lista 256 elementów) zliczający wystąpienia jasności.
    raster: obraz w skali szarości.
    """
    _require_gray(raster)
    hist = [0] * 256
    for v in raster.pixels:
        hist[v] += 1
    return hist


def cumulative_histogram(hist: List[int]) -> List[int]:
    """Dystrybuanta (CDF) – niemalejąca, cdf[255] = liczba pikseli."""
    cdf = [0] * 256
    cumsum = 0
    for i in range(256):
        cumsum += hist[i]
        cdf[i] = cumsum
    return cdf


def intensity_range(raster: Raster) -> Tuple[int, int]:
    """(min, max) jasności; dla pustego obrazu (255, 0)."""
    _require_gray(raster)
    imin, imax = 255, 0
    for v in raster.pixels:
        if v < imin:
            imin = v
        if v > imax:
            imax = v
    return imin, imax


def stretch_lut(imin: int, imax: int) -> List[int]:
    """
    Mapa 0..255 -> 0..255: new = (i - min) * 255 // (max - min).
    Poza przedziałem [min, max] wartości są obcinane (tam i tak nie ma pikseli).
    """
    if imax <= imin:
        raise ValueError("Rozciąganie wymaga max > min.")
    span = imax - imin
    return [clamp((i - imin) * 255 // span) for i in range(256)]


def equalize_lut(hist: List[int]) -> List[int]:
    """
    Mapa wyrównania histogramu:
    lut[i] = round((cdf[i] - cdf_min) / (total - cdf_min) * 255),
    zaokrąglenie połówek w górę, liczone na liczbach całkowitych.
    """
    cdf = cumulative_histogram(hist)
    total = cdf[-1]
    # najmniejsza wartość CDF > 0
    cdf_min = next((c for c in cdf if c > 0), 0)
    denom = total - cdf_min
    if denom == 0:
        raise ValueError("Wyrównanie wymaga co najmniej dwóch poziomów jasności.")
    return [clamp((2 * (c - cdf_min) * 255 + denom) // (2 * denom)) for c in cdf]


def apply_lut(raster: Raster, lut: List[int]) -> Raster:
    """Przemapowanie każdego piksela przez tablicę w jednym przebiegu."""
    _require_gray(raster)
    if len(lut) != 256:
        raise ValueError("Tablica LUT musi mieć 256 elementów.")
    return raster.with_pixels([lut[v] for v in raster.pixels])


def _degenerate(raster: Raster, what: str, strict: bool) -> Raster:
    if strict:
        raise InvalidInputError(f"{what}: obraz ma tylko jeden poziom jasności.")
    logger.debug("%s: obraz jednolity, zwracam bez zmian", what)
    return raster.copy()


def contrast_stretch(raster: Raster, strict: bool = False) -> Raster:
    """
    Rozciągnięcie kontrastu – liniowe przeskalowanie jasności tak,
    aby min -> 0, max -> 255.
    Obraz jednolity (max == min) jest zwracany bez zmian,
    a przy strict=True zgłaszany jako InvalidInputError.
    """
    _require_gray(raster)
    if not raster.pixels:
        return raster.copy()

    imin, imax = intensity_range(raster)
    if imin >= imax:
        return _degenerate(raster, "Rozciąganie kontrastu", strict)

    logger.debug("Rozciąganie kontrastu: min=%d max=%d", imin, imax)
    return apply_lut(raster, stretch_lut(imin, imax))


def histogram_equalize(raster: Raster, strict: bool = False) -> Raster:
    """
    Wyrównanie histogramu (histogram equalization) na obrazie w skali szarości.
    Histogram jednopoziomowy – jak w contrast_stretch.
    """
    _require_gray(raster)
    if not raster.pixels:
        return raster.copy()

    hist = compute_histogram(raster)
    levels = sum(1 for c in hist if c > 0)
    if levels < 2:
        return _degenerate(raster, "Wyrównanie histogramu", strict)

    logger.debug(
        "Wyrównanie histogramu: %d pikseli, %d poziomów", len(raster.pixels), levels
    )
    return apply_lut(raster, equalize_lut(hist))
