from functools import partial
from typing import Callable, Dict, List, Union

from .constants import PROC_EQUALIZE, PROC_STRETCH
from .histogram import contrast_stretch, histogram_equalize
from .raster import Raster

# przekształcenie: raster "L" -> raster "L" o tych samych wymiarach
Processor = Callable[[Raster], Raster]

PROCESSORS: Dict[str, Callable[..., Raster]] = {
    PROC_STRETCH: contrast_stretch,
    PROC_EQUALIZE: histogram_equalize,
}


def processor_names() -> List[str]:
    return sorted(PROCESSORS)


def get_processor(choice: Union[str, Processor], strict: bool = False) -> Processor:
    """Nazwa z rejestru albo gotowa funkcja -> funkcja Raster -> Raster."""
    if callable(choice):
        return choice
    try:
        fn = PROCESSORS[choice]
    except KeyError:
        raise ValueError(
            f"Nieznane przekształcenie: {choice!r} (dostępne: {', '.join(processor_names())})"
        ) from None
    return partial(fn, strict=strict)
