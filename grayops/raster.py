# grayops/raster.py
from dataclasses import dataclass, field
from typing import List, Tuple, Union

Color = Tuple[int, int, int]
Pixel = Union[int, Color]

MODE_RGB = "RGB"
MODE_GRAY = "L"

_CHANNELS = {MODE_RGB: 3, MODE_GRAY: 1}


def _check_sample(v) -> None:
    if not isinstance(v, int) or isinstance(v, bool) or v < 0 or v > 255:
        raise ValueError(f"Próbka spoza zakresu 0..255: {v!r}")


@dataclass
class Raster:
    """
    Obraz rastrowy w pamięci.
    Piksele skanline'ami od góry, długość listy = width * height.
    Tryb "RGB": piksel to krotka (R,G,B); tryb "L": piksel to jedna liczba.
    """

    width: int
    height: int
    pixels: List[Pixel] = field(repr=False)
    mode: str = MODE_GRAY

    def __post_init__(self):
        if self.mode not in _CHANNELS:
            raise ValueError(f"Nieznany tryb rastra: {self.mode}")
        if self.width < 0 or self.height < 0:
            raise ValueError("Wymiary rastra nie mogą być ujemne.")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"Liczba pikseli {len(self.pixels)} != {self.width}x{self.height}"
            )
        if self.mode == MODE_GRAY:
            for v in self.pixels:
                _check_sample(v)
        else:
            for px in self.pixels:
                if not isinstance(px, tuple) or len(px) != 3:
                    raise ValueError(f"Piksel RGB musi mieć 3 kanały: {px!r}")
                for v in px:
                    _check_sample(v)

    @property
    def channels(self) -> int:
        return _CHANNELS[self.mode]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def is_gray(self) -> bool:
        return self.mode == MODE_GRAY

    def copy(self) -> "Raster":
        return Raster(self.width, self.height, self.pixels[:], self.mode)

    def with_pixels(self, pixels: List[Pixel], mode: str = None) -> "Raster":
        """Nowy raster o tych samych wymiarach (wejście pozostaje nietknięte)."""
        return Raster(self.width, self.height, pixels, mode or self.mode)
