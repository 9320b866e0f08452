import pytest
from PIL import Image

from grayops.raster import MODE_GRAY, MODE_RGB


@pytest.fixture
def make_png(tmp_path):
    """Zapisuje listę pikseli RGB jako PNG i zwraca ścieżkę."""

    def _make(pixels, w, h, name="in.png"):
        img = Image.new(MODE_RGB, (w, h))
        img.putdata(pixels)
        path = tmp_path / name
        img.save(path)
        return str(path)

    return _make


@pytest.fixture
def read_gray():
    """(tryb zapisanego pliku, jasności pikseli)"""

    def _read(path):
        with Image.open(path) as img:
            return img.mode, list(img.convert(MODE_GRAY).tobytes())

    return _read
