import logging
from dataclasses import dataclass
from typing import Optional, Union

from .constants import DEFAULT_PROCESSOR, DEFAULT_QUALITY
from .image_ops import to_grayscale
from .io import read_image, write_image
from .processors import Processor, get_processor
from .raster import Raster

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    input_path: str
    output_path: str
    processor: str = DEFAULT_PROCESSOR
    fmt: Optional[str] = None  # None → z rozszerzenia pliku wyjściowego
    quality: int = DEFAULT_QUALITY
    strict: bool = False  # obraz jednolity → InvalidInputError zamiast kopii


def run(
    processor: Union[str, Processor],
    input_path: str,
    output_path: str,
    fmt: Optional[str] = None,
    quality: int = DEFAULT_QUALITY,
    strict: bool = False,
) -> Raster:
    """
    Wczytanie -> skala szarości -> wybrane przekształcenie -> zapis.
    Błędy wejścia/wyjścia przechodzą dalej jako ImageIOError, bez ponawiania.
    """
    fn = get_processor(processor, strict=strict)

    logger.info("Wczytywanie %s", input_path)
    rgb = read_image(input_path)
    gray = to_grayscale(rgb)

    name = processor if isinstance(processor, str) else getattr(processor, "__name__", "?")
    logger.info("Przekształcenie %s (%dx%d)", name, gray.width, gray.height)
    out = fn(gray)
    if out.size != gray.size:
        raise ValueError(
            f"Przekształcenie zmieniło wymiary: {gray.size} -> {out.size}"
        )

    used = write_image(output_path, out, fmt=fmt, quality=quality)
    logger.info("Zapisano %s (%s)", output_path, used)
    return out


def run_config(cfg: PipelineConfig) -> Raster:
    return run(
        cfg.processor,
        cfg.input_path,
        cfg.output_path,
        fmt=cfg.fmt,
        quality=cfg.quality,
        strict=cfg.strict,
    )
