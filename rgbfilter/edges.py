"""
REFERENCIAL TEÓRICO:
[1] Sobel, I., & Feldman, G. (1968). "A 3x3 Isotropic Gradient Operator for Image Processing".
    Stanford Artificial Intelligence Project.
[2] Gonzalez, R. C., & Woods, R. E. "Digital Image Processing".
    (Capítulo 10: Image Segmentation, Seção: Edge Detection).

RESUMO:
O operador de Sobel aproxima as derivadas parciais df/dx e df/dy com dois kernels 3x3.
A força da borda em cada pixel é a norma Euclidiana do gradiente, calculada
separadamente para cada canal de cor e saturada em 255.

O filtro recebe só a grade: altura e largura saem de len(image) e len(image[0]).
"""
from __future__ import annotations

from typing import List, Tuple
import math

from .utils import Grid, Pixel, clamp, dimensions, round_half_up, zeros
from .window import make_window

Kernel = Tuple[Tuple[int, int, int], Tuple[int, int, int], Tuple[int, int, int]]

# Tuplas: os kernels não podem ser alterados por quem importa o módulo
SOBEL_GX: Kernel = (
    (-1, 0, 1),
    (-2, 0, 2),
    (-1, 0, 1),
)

SOBEL_GY: Kernel = (
    (-1, -2, -1),
    (0, 0, 0),
    (1, 2, 1),
)


def sobel_channel(window: List[List[Pixel]], kernel: Kernel, channel: int) -> int:
    """Soma ponderada de um canal (0=R, 1=G, 2=B) da janela pelos pesos do kernel."""
    acc = 0
    for y in range(3):
        for x in range(3):
            acc += kernel[y][x] * window[y][x][channel]
    return acc


def edges(image: Grid) -> None:
    """
    Detecta bordas com o operador de Sobel, no lugar.

    EXPLICAÇÃO MATEMÁTICA:
    Para cada canal c da janela W:
        Gx = sum W.c * SOBEL_GX      Gy = sum W.c * SOBEL_GY
        G  = min(255, round( sqrt(Gx^2 + Gy^2) ))

    Nas bordas a janela vem preenchida com preto (zero-padding). Esses zeros entram na
    convolução normalmente, por isso uma região clara encostada na borda gera resposta.
    Longe das bordas, uma região de cor constante tem Gx = Gy = 0 e fica preta.
    """
    height, width = dimensions(image)
    temp = zeros(height, width)

    for y in range(height):
        for x in range(width):
            window, _ = make_window(y, x, image)

            magnitudes = []
            for channel in range(3):
                gx = sobel_channel(window, SOBEL_GX, channel)
                gy = sobel_channel(window, SOBEL_GY, channel)
                magnitude = round_half_up(math.sqrt(gx * gx + gy * gy))
                magnitudes.append(clamp(magnitude))

            temp[y][x] = (magnitudes[0], magnitudes[1], magnitudes[2])

    for y in range(height):
        image[y][:] = temp[y]
