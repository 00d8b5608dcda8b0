"""Testes de ponta a ponta da linha de comando (arquivo -> filtro -> arquivo)."""
import pytest
from PIL import Image

from rgbfilter.app import build_parser, main

PIXELS = [
    [(255, 0, 0), (0, 255, 0), (0, 0, 255), (10, 20, 30)],
    [(40, 50, 60), (70, 80, 90), (100, 110, 120), (130, 140, 150)],
    [(160, 170, 180), (190, 200, 210), (220, 230, 240), (250, 250, 250)],
]


@pytest.fixture
def bmp_file(tmp_path):
    path = tmp_path / "input.bmp"
    image = Image.new("RGB", (4, 3))
    for y, row in enumerate(PIXELS):
        for x, pixel in enumerate(row):
            image.putpixel((x, y), pixel)
    image.save(path)
    return path


def read_pixels(path):
    with Image.open(path) as image:
        image = image.convert("RGB")
        width, height = image.size
        return [[image.getpixel((x, y)) for x in range(width)] for y in range(height)]


def test_reflect_round_trip(bmp_file, tmp_path):
    out = tmp_path / "out.bmp"
    assert main(["-r", str(bmp_file), str(out)]) == 0
    assert read_pixels(out) == [list(reversed(row)) for row in PIXELS]


def test_grayscale_round_trip(bmp_file, tmp_path):
    out = tmp_path / "out.bmp"
    assert main(["-g", str(bmp_file), str(out)]) == 0
    result = read_pixels(out)
    assert result[0][0] == (85, 85, 85)
    assert result[1][3] == (140, 140, 140)


@pytest.mark.parametrize("flag", ["-b", "-e"])
def test_output_has_same_size(bmp_file, tmp_path, flag):
    out = tmp_path / "out.png"
    assert main([flag, str(bmp_file), str(out)]) == 0
    with Image.open(out) as image:
        assert image.size == (4, 3)


def test_max_dimension_downscales(bmp_file, tmp_path):
    out = tmp_path / "out.bmp"
    assert main(["-g", "--max-dimension", "2", str(bmp_file), str(out)]) == 0
    with Image.open(out) as image:
        assert image.size == (2, 1)


def test_missing_input_returns_error(tmp_path):
    assert main(["-b", str(tmp_path / "nope.bmp"), str(tmp_path / "out.bmp")]) == 1
    assert not (tmp_path / "out.bmp").exists()


def test_exactly_one_filter_flag(bmp_file, tmp_path):
    parser = build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["-g", "-b", str(bmp_file), str(tmp_path / "out.bmp")])
    with pytest.raises(SystemExit):
        parser.parse_args([str(bmp_file), str(tmp_path / "out.bmp")])
    assert parser.parse_args(["-e", "a", "b"]).filter == "edges"
