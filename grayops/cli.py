import argparse
import logging

from .constants import DEFAULT_QUALITY, LOG_DATEFMT, LOG_FORMAT
from .errors import GrayopsError
from .pipeline import PipelineConfig, run_config
from .processors import processor_names

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="grayops",
        description="Skala szarości + rozciąganie kontrastu / wyrównanie histogramu.",
    )
    p.add_argument("processor", choices=processor_names(), help="przekształcenie")
    p.add_argument("input", help="plik wejściowy")
    p.add_argument("output", help="plik wyjściowy")
    p.add_argument(
        "--format",
        dest="fmt",
        default=None,
        help="format zapisu (domyślnie z rozszerzenia pliku wyjściowego)",
    )
    p.add_argument(
        "--quality", type=int, default=DEFAULT_QUALITY, help="jakość JPEG (1-95)"
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="obraz jednolity traktuj jako błąd zamiast zwracać go bez zmian",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="logi DEBUG")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    cfg = PipelineConfig(
        input_path=args.input,
        output_path=args.output,
        processor=args.processor,
        fmt=args.fmt,
        quality=args.quality,
        strict=args.strict,
    )
    try:
        run_config(cfg)
    except GrayopsError as e:
        logger.error("%s", e)
        return 1
    return 0
