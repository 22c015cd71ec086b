"""
Cube Rendering

Draws a cube state as an unfolded net image with Pillow, in the same
layout as the text net printed by CubeState:

        U
      L F R B
        D
"""

from pathlib import Path
from typing import Dict, Tuple, Union

from PIL import Image, ImageDraw

from .cube import Color, CubeState, Face


# Fill colour of each sticker
STICKER_COLORS: Dict[Color, str] = {
    Color.WHITE: "#FFFFFF",
    Color.GREEN: "#009B48",
    Color.RED: "#B71234",
    Color.BLUE: "#0046AD",
    Color.ORANGE: "#FF5800",
    Color.YELLOW: "#FFD500",
}

BACKGROUND = "#202020"
OUTLINE = "black"
FACE_GAP = 4

# (column, row) of each face in the net, in face units
NET_POSITIONS: Dict[Face, Tuple[int, int]] = {
    Face.UP: (1, 0),
    Face.LEFT: (0, 1),
    Face.FRONT: (1, 1),
    Face.RIGHT: (2, 1),
    Face.BACK: (3, 1),
    Face.DOWN: (1, 2),
}


def render_cube(state: CubeState, cell_size: int = 24) -> Image.Image:
    """
    Render a cube state as a net.

    Args:
        state: Cube state to draw
        cell_size: Edge length of one sticker in pixels

    Returns:
        RGB image of size (4 * face + 5 * gap) x (3 * face + 4 * gap),
        where face = n * cell_size
    """
    n = state.size()
    face_px = n * cell_size
    width = 4 * face_px + 5 * FACE_GAP
    height = 3 * face_px + 4 * FACE_GAP

    img = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(img)

    for face, (col, row) in NET_POSITIONS.items():
        ox = FACE_GAP + col * (face_px + FACE_GAP)
        oy = FACE_GAP + row * (face_px + FACE_GAP)
        base = int(face) * n * n
        for i in range(n):
            for j in range(n):
                color = state.data_at(base + i * n + j)
                x = ox + j * cell_size
                y = oy + i * cell_size
                draw.rectangle(
                    [x, y, x + cell_size - 1, y + cell_size - 1],
                    fill=STICKER_COLORS[color],
                    outline=OUTLINE,
                )

    return img


def save_cube_image(state: CubeState, path: Union[str, Path], cell_size: int = 24) -> None:
    """
    Save a rendered net as PNG, creating the parent directory if needed.

    Args:
        state: Cube state to draw
        path: Output file path
        cell_size: Edge length of one sticker in pixels
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    render_cube(state, cell_size).save(path, "PNG")
