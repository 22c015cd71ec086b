"""
Tests for the Pillow cube renderer.
"""

from PIL import Image

from nxcube.cube import CubeState
from nxcube.render import FACE_GAP, render_cube, save_cube_image


def test_image_size():
    for n in (2, 3, 5):
        img = render_cube(CubeState.std_solved_nxnxn(n), cell_size=10)
        face = n * 10
        assert img.size == (4 * face + 5 * FACE_GAP, 3 * face + 4 * FACE_GAP)


def test_sticker_colors():
    img = render_cube(CubeState.std_solved_nxnxn(3), cell_size=10)
    face = 30
    # first sticker of Up
    up = (FACE_GAP + face + FACE_GAP + 5, FACE_GAP + 5)
    # centre of Front
    front = (FACE_GAP + face + FACE_GAP + 15, FACE_GAP + face + FACE_GAP + 15)
    assert img.getpixel(up) == (255, 255, 255)
    assert img.getpixel(front) == (0xB7, 0x12, 0x34)


def test_save_cube_image(tmp_path):
    path = tmp_path / "renders" / "cube.png"
    save_cube_image(CubeState.std_solved_nxnxn(2), path, cell_size=8)
    with Image.open(path) as img:
        assert img.format == "PNG"
        assert img.size == render_cube(CubeState.std_solved_nxnxn(2), 8).size
