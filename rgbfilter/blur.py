"""
Box Filter (Mean Filter) 3x3 com normalização pelas bordas.

REFERENCIAL TEÓRICO GERAL:
[1] Gonzalez, R. C., & Woods, R. E. (2002). "Digital Image Processing".
    Prentice Hall. (Capítulo 3: Intensity Transformations and Spatial Filtering).
[2] McDonnell, M. J. (1981). "Box-filtering techniques".
    Computer Graphics and Image Processing, 17(1), 65-70.

RESUMO:
O filtro de média substitui cada pixel pela média aritmética da sua vizinhança 3x3.
Diferente do box filter clássico (divisão fixa por 9), aqui a média é feita apenas sobre
os vizinhos que existem: um canto é a média de 4 pixels, uma borda de 6. Assim as bordas
não escurecem por causa dos pixels pretos usados como preenchimento.

O filtro recebe só a grade: altura e largura saem de len(image) e len(image[0]).
"""
from __future__ import annotations

from .utils import Grid, dimensions, round_half_up, zeros
from .window import make_window


def blur(image: Grid) -> None:
    """
    Aplica o desfoque de caixa 3x3 na imagem, canal a canal.

    EXPLICAÇÃO MATEMÁTICA:
    Para cada pixel (y, x) com janela W e n vizinhos válidos:
        saida_c(y, x) = round( sum_{i,j} W[i][j].c / n )

    As posições preenchidas com preto somam 0 e também ficam fora de n, então o resultado
    é exatamente a média dos pixels reais. Imagens de cor uniforme não mudam.

    COMPORTAMENTO:
    Todas as janelas são lidas da imagem original. O resultado vai para uma grade
    temporária e só no fim é copiado por cima da imagem; escrever direto na imagem
    contaminaria os vizinhos dos pixels seguintes com valores já borrados.
    """
    height, width = dimensions(image)
    temp = zeros(height, width)

    for y in range(height):
        for x in range(width):
            window, valid_count = make_window(y, x, image)

            red = 0
            green = 0
            blue = 0
            for wy in range(3):
                for wx in range(3):
                    r, g, b = window[wy][wx]
                    red += r
                    green += g
                    blue += b

            temp[y][x] = (
                round_half_up(red / valid_count),
                round_half_up(green / valid_count),
                round_half_up(blue / valid_count),
            )

    # Copia o resultado sobre as linhas originais
    for y in range(height):
        image[y][:] = temp[y]
