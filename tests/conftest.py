"""
Fixtures compartilhadas pelos testes dos filtros.

As imagens são grades pequenas (listas de linhas de tuplas RGB) para que os valores
esperados possam ser calculados à mão.
"""
import random

import pytest

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


@pytest.fixture
def white_3x3():
    return [[WHITE for _ in range(3)] for _ in range(3)]


@pytest.fixture
def uniform_5x4():
    """Imagem 4 linhas x 5 colunas de uma única cor."""
    return [[(10, 120, 200) for _ in range(5)] for _ in range(4)]


@pytest.fixture
def random_image():
    rng = random.Random(1234)
    return [
        [(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255)) for _ in range(7)]
        for _ in range(6)
    ]


@pytest.fixture
def bright_dot():
    """Fundo preto 7x7 com um único pixel branco em (3, 3)."""
    image = [[BLACK for _ in range(7)] for _ in range(7)]
    image[3][3] = WHITE
    return image
