"""Registro dos filtros disponíveis e ponto único de aplicação."""
from __future__ import annotations

from typing import Callable, Dict
import logging

from .blur import blur
from .edges import edges
from .grayscale import grayscale
from .reflect import reflect
from .utils import Grid, dimensions, validate_grid

logger = logging.getLogger(__name__)

FILTERS: Dict[str, Callable[[Grid], None]] = {
    "grayscale": grayscale,
    "reflect": reflect,
    "blur": blur,
    "edges": edges,
}


def apply_filter(name: str, image: Grid) -> None:
    """Valida a grade e aplica o filtro `name` no lugar."""
    if name not in FILTERS:
        raise ValueError(f"Filtro desconhecido: {name!r} (opções: {', '.join(FILTERS)})")

    validate_grid(image)
    height, width = dimensions(image)
    logger.debug("Aplicando %s em imagem %dx%d", name, width, height)
    FILTERS[name](image)
