import io
import os
import warnings

import pytest
from PIL import Image

from grayops.errors import ImageIOError
from grayops.io import raster_io
from grayops.io.raster_io import encode_image, read_image, resolve_format, write_image
from grayops.raster import Raster, MODE_GRAY, MODE_RGB


def test_read_png_as_rgb(make_png):
    path = make_png([(1, 2, 3), (4, 5, 6)], 2, 1)
    r = read_image(path)
    assert r.mode == MODE_RGB
    assert r.size == (2, 1)
    assert r.pixels == [(1, 2, 3), (4, 5, 6)]


def test_read_gray_file_converted_to_rgb(tmp_path):
    path = tmp_path / "g.png"
    img = Image.new(MODE_GRAY, (2, 1))
    img.putdata([10, 250])
    img.save(path)
    assert read_image(str(path)).pixels == [(10, 10, 10), (250, 250, 250)]


def test_read_missing_file(tmp_path):
    with pytest.raises(ImageIOError) as exc:
        read_image(str(tmp_path / "nope.png"))
    assert isinstance(exc.value, OSError)
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_read_not_an_image(tmp_path):
    path = tmp_path / "fake.png"
    path.write_text("to nie jest obraz")
    with pytest.raises(ImageIOError):
        read_image(str(path))


@pytest.mark.parametrize(
    "name, fmt, expected",
    [
        ("out.png", None, "PNG"),
        ("out.JPG", None, "JPEG"),
        ("out.jpeg", None, "JPEG"),
        ("out.bmp", None, "BMP"),
        ("out.pgm", None, "PPM"),
        ("out.dat", "png", "PNG"),
        ("out.dat", "jpg", "JPEG"),
    ],
)
def test_resolve_format(name, fmt, expected):
    assert resolve_format(name, fmt) == expected


@pytest.mark.parametrize("name, fmt", [("out.xyz", None), ("out", None), ("a.png", "nope")])
def test_resolve_format_unknown(name, fmt):
    with pytest.raises(ImageIOError):
        resolve_format(name, fmt)


def test_gray_written_as_l(tmp_path, read_gray):
    path = str(tmp_path / "out.png")
    assert write_image(path, Raster(3, 1, [0, 128, 255])) == "PNG"
    mode, values = read_gray(path)
    assert mode == MODE_GRAY
    assert values == [0, 128, 255]


def test_gray_replicated_when_format_lacks_l(monkeypatch):
    monkeypatch.setattr(raster_io, "GRAY_FORMATS", set())
    data = encode_image(Raster(2, 1, [9, 99]), "PNG")
    with Image.open(io.BytesIO(data)) as img:
        assert img.mode == MODE_RGB
        assert img.tobytes() == bytes([9, 9, 9, 99, 99, 99])


def test_jpeg_gray_roundtrip_close(tmp_path, read_gray):
    path = str(tmp_path / "out.jpg")
    write_image(path, Raster(8, 8, [120] * 64), quality=95)
    mode, values = read_gray(path)
    assert mode == MODE_GRAY
    assert all(abs(v - 120) <= 2 for v in values)


def test_unwritable_destination(tmp_path):
    path = tmp_path / "missing_dir" / "out.png"
    with pytest.raises(ImageIOError):
        write_image(str(path), Raster(1, 1, [0]))
    assert not path.exists()


def test_unknown_format_writes_nothing(tmp_path):
    path = tmp_path / "out.xyz"
    with pytest.raises(ImageIOError):
        write_image(str(path), Raster(1, 1, [0]))
    assert not os.path.exists(path)


def test_read_emits_no_deprecation_warning(make_png):
    path = make_png([(1, 2, 3)], 1, 1)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        assert read_image(path).pixels == [(1, 2, 3)]
    assert not [w for w in caught if issubclass(w.category, DeprecationWarning)]


def test_decompression_bomb_wrapped(make_png, monkeypatch):
    path = make_png([(0, 0, 0)] * 4, 2, 2)
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1)
    with pytest.raises(ImageIOError) as exc:
        read_image(path)
    assert isinstance(exc.value.__cause__, Image.DecompressionBombError)


def test_failed_replace_keeps_old_file(tmp_path, monkeypatch):
    path = tmp_path / "out.png"
    path.write_bytes(b"stary")

    def fail(src, dst):
        raise OSError("brak miejsca")

    monkeypatch.setattr(os, "replace", fail)
    with pytest.raises(ImageIOError):
        write_image(str(path), Raster(1, 1, [0]))
    assert path.read_bytes() == b"stary"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["out.png"]


def test_overwrites_existing_file(tmp_path, read_gray):
    path = tmp_path / "out.png"
    path.write_bytes(b"stary")
    write_image(str(path), Raster(2, 1, [3, 4]))
    assert read_gray(str(path))[1] == [3, 4]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["out.png"]
