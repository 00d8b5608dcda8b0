"""
REFERENCIAL TEÓRICO:
[1] Gonzalez, R. C., & Woods, R. E. "Digital Image Processing".
    (Capítulo 2: Digital Image Fundamentals; Capítulo 6: Color Image Processing).

RESUMO:
Este módulo reúne as operações de baixo nível compartilhadas pelos filtros:
1. Representação da imagem como lista de linhas de pixels RGB.
2. Conversão entre arrays numpy (OpenCV) e listas de listas.
3. Arredondamento, saturação e validação da grade de pixels.
"""

from __future__ import annotations

from typing import List, Tuple
import math
import numbers

import numpy as np

Pixel = Tuple[int, int, int]
Grid = List[List[Pixel]]

BLACK: Pixel = (0, 0, 0)


def to_list(image: np.ndarray) -> Grid:
    """Converte array numpy (H, W, 3) RGB para lista de listas de tuplas."""
    return [[(int(r), int(g), int(b)) for r, g, b in row] for row in image.tolist()]


def to_array(image: Grid) -> np.ndarray:
    height, width = dimensions(image)
    return np.array(image, dtype=np.uint8).reshape(height, width, 3)


def zeros(height: int, width: int, value: Pixel = BLACK) -> Grid:
    return [[value for _ in range(width)] for _ in range(height)]


def dimensions(image: Grid) -> Tuple[int, int]:
    height = len(image)
    width = len(image[0]) if height else 0
    return height, width


def round_half_up(value: float) -> int:
    """
    Arredonda um valor não-negativo para o inteiro mais próximo, com empates (.5) para cima.

    O round() do Python usa arredondamento bancário (empate para o par), o que
    faria round(0.5) == 0. Para canais de cor (sempre >= 0) o comportamento esperado
    é o do round() de C: 0.5 -> 1, 2.5 -> 3.
    """
    return int(math.floor(value + 0.5))


def clamp(value: int, low: int = 0, high: int = 255) -> int:
    return max(low, min(high, value))


def validate_grid(image: Grid) -> None:
    """
    Verifica se a grade é retangular e se todos os pixels são triplas RGB de 8 bits.

    Os filtros assumem entrada bem formada; esta checagem fica na fronteira
    (quem carrega a imagem) e levanta ValueError na primeira violação encontrada.
    Canais inteiros do numpy (np.uint8, ...) são aceitos e trocados por int no lugar,
    já que somas em uint8 estourariam dentro dos filtros. bool não conta como canal.
    """
    height, width = dimensions(image)
    for y in range(height):
        row = image[y]
        if len(row) != width:
            raise ValueError(f"Linha {y} tem {len(row)} pixels, esperado {width}")
        for x in range(width):
            pixel = row[x]
            if not isinstance(pixel, tuple) or len(pixel) != 3:
                raise ValueError(f"Pixel ({y}, {x}) não é uma tripla RGB: {pixel!r}")
            for channel in pixel:
                if not isinstance(channel, numbers.Integral) or isinstance(channel, (bool, np.bool_)):
                    raise ValueError(f"Canal não inteiro no pixel ({y}, {x}): {pixel!r}")
                if not 0 <= channel <= 255:
                    raise ValueError(f"Canal fora do intervalo [0, 255] no pixel ({y}, {x}): {pixel!r}")
            if any(type(channel) is not int for channel in pixel):
                row[x] = (int(pixel[0]), int(pixel[1]), int(pixel[2]))
