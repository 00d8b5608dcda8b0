"""
Espelhamento horizontal da imagem, trocando pixels das duas metades de cada linha.

O filtro recebe só a grade: altura e largura saem de len(image) e len(image[0]).
"""
from __future__ import annotations

from .utils import Grid, dimensions


def reflect(image: Grid) -> None:
    """Espelha a imagem horizontalmente (esquerda <-> direita), no lugar."""
    height, width = dimensions(image)
    half = width // 2

    for y in range(height):
        row = image[y]
        # Em larguras ímpares a coluna do meio fica onde está
        for x in range(half):
            mirror = width - 1 - x
            row[x], row[mirror] = row[mirror], row[x]
