# grayops/io/raster_io.py
import io
import logging
import os
import tempfile
from typing import Optional

try:
    from PIL import Image, UnidentifiedImageError
except ImportError as e:
    raise ImportError("Brak biblioteki Pillow. Zainstaluj: pip install Pillow") from e

from ..constants import DEFAULT_QUALITY, GRAY_FORMATS
from ..errors import ImageIOError
from ..image_ops import gray_to_rgb
from ..raster import MODE_GRAY, MODE_RGB, Raster

logger = logging.getLogger(__name__)


def read_image(path: str) -> Raster:
    """Wczytuje dowolny obraz obsługiwany przez Pillow jako raster RGB (8 bit)."""
    try:
        with Image.open(path) as src:
            img = src.convert(MODE_RGB)
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
        raise ImageIOError(f"Nie udało się wczytać obrazu {path}: {e}") from e
    w, h = img.size
    raw = img.tobytes()  # r,g,b,r,g,b... wierszami od góry
    data = list(zip(raw[0::3], raw[1::3], raw[2::3]))
    logger.debug("Wczytano %s (%dx%d)", path, w, h)
    return Raster(w, h, data, MODE_RGB)


def resolve_format(path: str, fmt: Optional[str] = None) -> str:
    """Format Pillow z jawnej nazwy albo z rozszerzenia pliku wyjściowego."""
    if fmt:
        name = fmt.upper()
        if name == "JPG":
            name = "JPEG"
        Image.init()
        if name not in Image.SAVE:
            raise ImageIOError(f"Nieobsługiwany format zapisu: {fmt}")
        return name
    ext = os.path.splitext(path)[1].lower()
    name = Image.registered_extensions().get(ext)
    if not name or name not in Image.SAVE:
        raise ImageIOError(f"Nie można ustalić formatu zapisu dla {path!r}")
    return name


def encode_image(raster: Raster, fmt: str, quality: int = DEFAULT_QUALITY) -> bytes:
    """Koduje raster w pamięci; jednokanałowy zapisywany jako "L", jeśli format pozwala."""
    if raster.channels == 1 and fmt not in GRAY_FORMATS:
        raster = gray_to_rgb(raster)
    img = Image.new(raster.mode, (raster.width, raster.height))
    img.putdata(raster.pixels)

    params = {}
    if fmt == "JPEG":
        # subsampling=0 → najlepsza jakość, optimize=True → mniejsze pliki
        params = {"quality": int(quality), "optimize": True}
        if raster.mode != MODE_GRAY:
            params["subsampling"] = 0

    buf = io.BytesIO()
    try:
        img.save(buf, format=fmt, **params)
    except (OSError, ValueError, KeyError) as e:
        raise ImageIOError(f"Nie udało się zakodować obrazu jako {fmt}: {e}") from e
    return buf.getvalue()


def write_image(
    path: str,
    raster: Raster,
    fmt: Optional[str] = None,
    quality: int = DEFAULT_QUALITY,
) -> str:
    """
    Zapisuje raster do pliku. Obraz jest najpierw w całości kodowany w pamięci,
    potem zapisywany do pliku tymczasowego obok celu i podmieniany przez os.replace,
    więc przy błędzie cel nie powstaje (ani nie jest nadpisany).
    Zwraca użyty format.
    """
    name = resolve_format(path, fmt)
    data = encode_image(raster, name, quality)
    tmp = None
    try:
        fd, tmp = tempfile.mkstemp(
            dir=os.path.dirname(os.path.abspath(path)), prefix=".grayops-", suffix=".tmp"
        )
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, path)
    except OSError as e:
        if tmp is not None and os.path.exists(tmp):
            os.remove(tmp)
        raise ImageIOError(f"Nie udało się zapisać {path}: {e}") from e
    logger.debug("Zapisano %s (%s, %d bajtów)", path, name, len(data))
    return name
