PROC_STRETCH = "contrast-stretch"
PROC_EQUALIZE = "histogram-equalize"

DEFAULT_PROCESSOR = PROC_EQUALIZE
DEFAULT_QUALITY = 90  # jak w zapisie JPEG w edytorze

# formaty Pillow, które zapiszą obraz w trybie "L" bez konwersji
GRAY_FORMATS = {"JPEG", "PNG", "BMP", "TIFF", "PPM", "GIF", "TGA", "WEBP", "PCX", "IM"}

LOG_FORMAT = "%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"
