import numpy as np
import pytest
from PIL import Image

from pxtext.export import column_profile, save_png, to_array, to_image, to_text
from pxtext.glyphs import GLYPHS
from pxtext.renderer import render


def test_to_array():
    arr = to_array(render("l"))
    assert arr.dtype == np.uint8
    assert arr.shape == (7, 3)
    assert arr[:, 1].tolist() == [0, 1, 1, 1, 1, 1, 0]


def test_to_array_rejects_ragged_rows():
    with pytest.raises(ValueError, match="columns"):
        to_array(["000", "00"])


def test_to_array_rejects_non_bits():
    with pytest.raises(ValueError):
        to_array(["010", "0x0"])


def test_to_text():
    assert to_text(render("l")) == "\n".join(["..."] + [".#."] * 5 + ["..."])
    assert to_text(["01"], on="1", off=" ") == " 1"


def test_column_profile_ill():
    assert column_profile(render("ill")) == [0, 4, 0, 5, 0, 5, 0]


@pytest.mark.parametrize("text", ["Hello World", "Quiz", "a b"])
def test_column_profile_matches_width_formula(text):
    expected = sum(GLYPHS.lookup(ch).width for ch in text) + len(text) - 1 + 2
    profile = column_profile(render(text))
    assert len(profile) == expected
    assert profile[0] == 0 and profile[-1] == 0


def test_to_image_scales_pixels():
    img = to_image(render("l"), scale=2)
    assert isinstance(img, Image.Image)
    assert img.mode == "RGB"
    assert img.size == (6, 14)
    assert img.getpixel((0, 0)) == (255, 255, 255)
    assert img.getpixel((2, 2)) == (0, 0, 0)
    assert img.getpixel((3, 11)) == (0, 0, 0)
    assert img.getpixel((4, 2)) == (255, 255, 255)


def test_to_image_custom_colors():
    img = to_image(render("l"), scale=1, fg_color=(255, 0, 0), bg_color=(0, 0, 255))
    assert img.getpixel((1, 1)) == (255, 0, 0)
    assert img.getpixel((0, 1)) == (0, 0, 255)


def test_to_image_rejects_bad_scale():
    with pytest.raises(ValueError):
        to_image(render("l"), scale=0)


def test_save_png(tmp_path):
    path = tmp_path / "out" / "ill.png"
    img = save_png(render("ill"), path, scale=3)
    assert path.exists()
    assert img.size == (21, 21)
    with Image.open(path) as saved:
        assert saved.size == (21, 21)


@pytest.mark.parametrize("rows", [[], ["", ""]])
def test_to_image_rejects_empty_rows(rows):
    with pytest.raises(ValueError, match="empty"):
        to_image(rows)
