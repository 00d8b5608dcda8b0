"""
Conversão para tons de cinza por média simples dos canais.

REFERENCIAL TEÓRICO:
[1] Gonzalez, R. C., & Woods, R. E. "Digital Image Processing".
    (Capítulo 6: Color Image Processing, modelo RGB).

O filtro recebe só a grade: altura e largura saem de len(image) e len(image[0]).
"""
from __future__ import annotations

from .utils import Grid, dimensions, round_half_up


def grayscale(image: Grid) -> None:
    """
    Substitui cada pixel pela média arredondada de R, G e B, repetida nos três canais.

    A soma de três canais de 8 bits dividida por 3 nunca sai de [0, 255], então não há
    saturação. Aplicar duas vezes dá o mesmo resultado.
    """
    height, width = dimensions(image)
    for y in range(height):
        row = image[y]
        for x in range(width):
            r, g, b = row[x]
            gray = round_half_up((r + g + b) / 3.0)
            row[x] = (gray, gray, gray)
