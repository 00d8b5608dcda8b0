"""
Vizinhança 3x3 (Janela) com preenchimento por zeros.

REFERENCIAL TEÓRICO:
[1] Gonzalez, R. C., & Woods, R. E. "Digital Image Processing".
    Seção: Fundamentals of Spatial Filtering (padding das bordas).

RESUMO:
Tanto o desfoque quanto a detecção de bordas operam sobre a vizinhança-8 de cada pixel.
Nas bordas da imagem parte dessa vizinhança não existe; em vez de repetir o pixel da
extremidade, as posições ausentes recebem um pixel preto (0, 0, 0) e não entram na
contagem de vizinhos válidos.
"""
from __future__ import annotations

from typing import List, Tuple

from .utils import BLACK, Grid, Pixel, dimensions

# Deslocamentos (dy, dx) da vizinhança-8, na ordem da janela
NEIGHBOR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


def make_window(row: int, col: int, image: Grid) -> Tuple[List[List[Pixel]], int]:
    """
    Monta a janela 3x3 centrada em (row, col) e conta quantas posições são pixels reais.

    A contagem vale 9 no interior, 6 nas bordas, 4 nos cantos e 1 numa imagem 1x1.
    O centro fora da imagem é violação de contrato e levanta IndexError.
    """
    height, width = dimensions(image)
    if not (0 <= row < height and 0 <= col < width):
        raise IndexError(f"Centro ({row}, {col}) fora da imagem {height}x{width}")

    window = [[BLACK for _ in range(3)] for _ in range(3)]

    # O próprio pixel sempre conta
    window[1][1] = image[row][col]
    valid_count = 1

    for dy, dx in NEIGHBOR_OFFSETS:
        y = row + dy
        x = col + dx
        if 0 <= y < height and 0 <= x < width:
            window[dy + 1][dx + 1] = image[y][x]
            valid_count += 1

    return window, valid_count
