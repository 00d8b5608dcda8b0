"""Interface de linha de comando: carrega a imagem, aplica um filtro e salva o resultado."""
from __future__ import annotations

from typing import List, Optional
import argparse
import logging
import sys

import cv2
from PIL import Image

from .filters import apply_filter
from .utils import Grid, dimensions, to_array, to_list

logger = logging.getLogger(__name__)

# Constante para limitar o tamanho da imagem e acelerar o processamento (0 desliga)
MAX_DIMENSION = 0

# Mesmas letras do programa original: -g, -r, -b, -e
FLAGS = {
    "g": "grayscale",
    "r": "reflect",
    "b": "blur",
    "e": "edges",
}


def resize_if_needed(image, max_dimension: int):
    h, w = image.shape[:2]
    if max_dimension > 0 and max(h, w) > max_dimension:
        scale = max_dimension / max(h, w)
        new_w, new_h = max(1, int(w * scale)), max(1, int(h * scale))
        logger.info("Redimensionando de %dx%d para %dx%d", w, h, new_w, new_h)
        return cv2.resize(image, (new_w, new_h), interpolation=cv2.INTER_AREA)
    return image


def load_image(path: str, max_dimension: int = MAX_DIMENSION) -> Optional[Grid]:
    # Carrega com OpenCV (BGR); canal alfa, se houver, é descartado
    image = cv2.imread(path, cv2.IMREAD_COLOR)
    if image is None:
        return None

    image = resize_if_needed(image, max_dimension)
    image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
    return to_list(image)


def rgb_to_image(data: Grid) -> Image.Image:
    height, width = dimensions(data)
    return Image.frombytes("RGB", (width, height), to_array(data).tobytes())


def save_image(data: Grid, path: str) -> None:
    rgb_to_image(data).save(path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rgbfilter",
        description="Aplica um filtro espacial (cinza, espelho, desfoque ou bordas) em uma imagem RGB.",
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("-g", dest="filter", action="store_const", const=FLAGS["g"], help="tons de cinza")
    group.add_argument("-r", dest="filter", action="store_const", const=FLAGS["r"], help="espelho horizontal")
    group.add_argument("-b", dest="filter", action="store_const", const=FLAGS["b"], help="desfoque 3x3")
    group.add_argument("-e", dest="filter", action="store_const", const=FLAGS["e"], help="bordas (Sobel)")
    parser.add_argument("infile", help="imagem de entrada (bmp, png, jpg, ...)")
    parser.add_argument("outfile", help="imagem de saída")
    parser.add_argument(
        "--max-dimension",
        type=int,
        default=MAX_DIMENSION,
        help="reduz a imagem se o maior lado passar deste valor (0 desliga)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log em nível DEBUG")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    image = load_image(args.infile, args.max_dimension)
    if image is None:
        logger.error("Não foi possível ler a imagem: %s", args.infile)
        return 1

    apply_filter(args.filter, image)
    save_image(image, args.outfile)
    logger.info("Filtro %s aplicado: %s -> %s", args.filter, args.infile, args.outfile)
    return 0


if __name__ == "__main__":
    sys.exit(main())
