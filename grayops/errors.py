class GrayopsError(Exception):
    """Bazowy wyjątek pakietu."""


class ImageIOError(GrayopsError, OSError):
    """Nie da się odczytać / zapisać pliku obrazu albo format jest nieobsługiwany."""


class InvalidInputError(GrayopsError, ValueError):
    """Raster nie nadaje się do danego przekształcenia (np. obraz jednolity)."""
