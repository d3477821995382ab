"""Vertex and index data for the sky dome, checkpoint rings and water surface."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable

Vertex = tuple[float, ...]

# Sky grid half-extent and the dome curvature factor.
_SKY_RANGE = 10
_SKY_FACTOR = 0.02

# Number of segments around a checkpoint ring.
_CHECKPOINT_SPLITS = 20

# Water grid half-extent (in cells) and the size of one cell in world units.
_WATER_RANGE = 20
WATER_CELL_SIZE = 20.0

_DEFAULT_WATER_ALPHA = 0.5


@dataclass
class Mesh:
    """Interleaved vertex data with an index buffer for triangle strips.

    `count` is how many indices are drawn. `offset` is the whole-cell shift
    of a grid mesh, applied together with a scale of WATER_CELL_SIZE.
    """

    stride: int
    vertices: list[Vertex]
    indices: list[int]
    count: int = -1
    offset: tuple[int, int] = field(default=(0, 0))

    def __post_init__(self) -> None:
        if self.count < 0:
            self.count = len(self.indices)


def _grid_strip_indices(rows: int, columns: int, row_stride: int) -> list[int]:
    """Index a grid as rows of triangle strips, each row closed by a (0, 0) restart pair."""
    indices: list[int] = []
    for row in range(rows):
        for column in range(columns):
            indices.append((row + 1) * row_stride + column)
            indices.append(row * row_stride + column)
        indices.extend((0, 0))
    return indices


def build_sky_mesh() -> Mesh:
    """Build the cloud layer: a curved grid of (u, v, x, y, z) vertices."""
    columns = 2 * _SKY_RANGE + 1
    vertices = [
        (float(x), float(y), float(x), float(y), 0.3 - (x * x + y * y) * _SKY_FACTOR)
        for y in range(-_SKY_RANGE, _SKY_RANGE)
        for x in range(-_SKY_RANGE, _SKY_RANGE + 1)
    ]
    indices = _grid_strip_indices(2 * _SKY_RANGE, columns, columns)
    return Mesh(
        stride=5,
        vertices=vertices,
        indices=indices,
        count=columns * (2 * _SKY_RANGE) * 2,
    )


def build_checkpoint_mesh() -> Mesh:
    """Build a checkpoint ring: two strips fading out above and below a bright middle.

    Vertices are (r, g, b, a, nx, ny, nz, x, y, z); only the middle row is opaque.
    """
    vertices: list[Vertex] = []
    for i in range(_CHECKPOINT_SPLITS):
        angle = i * 2 * math.pi / _CHECKPOINT_SPLITS
        for j in range(3):
            vertices.append((
                0.0, 0.0, 0.0, 1.0 if j == 1 else 0.0,
                0.0, 0.0, 0.0,
                math.cos(angle), math.sin(angle), float(j - 1),
            ))
    ring = [i % _CHECKPOINT_SPLITS * 3 for i in range(_CHECKPOINT_SPLITS + 1)]
    lower = [index for base in ring for index in (base, base + 1)]
    upper = [index for base in ring for index in (base + 1, base + 2)]
    return Mesh(stride=10, vertices=vertices, indices=lower + upper)


def _water_alpha(ground: float, water_height: float, maxalpha: float) -> float:
    exponent = ground - water_height
    if exponent > 700.0:
        return 0.0
    return min(max(1.0 - math.exp(exponent), 0.0), maxalpha)


def build_water_mesh(
    campos_x: float,
    campos_y: float,
    water_height: float,
    height_at: Callable[[float, float], float],
    fixed_alpha: bool = False,
    user_alpha: float | None = None,
) -> Mesh:
    """Build the water surface grid around the camera.

    Vertices are (u, v, r, g, b, a, nx, ny, nz, x, y, z) in grid cells. Unless
    the alpha is fixed, each vertex fades with the depth of the ground below it,
    as reported by `height_at(x, y)` in world units.
    """
    off_x = int(campos_x / WATER_CELL_SIZE)
    off_y = int(campos_y / WATER_CELL_SIZE)
    row_stride = 2 * _WATER_RANGE
    zero: Vertex = (0.0,) * 12
    vertices: list[Vertex] = [zero] * (row_stride * (2 * _WATER_RANGE + 1))

    maxalpha = _DEFAULT_WATER_ALPHA if user_alpha is None else user_alpha
    alpha = maxalpha
    for y in range(-_WATER_RANGE, _WATER_RANGE):
        for x in range(-_WATER_RANGE, _WATER_RANGE + 1):
            if not fixed_alpha:
                ground = height_at(
                    (x + off_x) * WATER_CELL_SIZE, (y + off_y) * WATER_CELL_SIZE
                )
                alpha = _water_alpha(ground, water_height, maxalpha)
            # The last column of a row shares its slot with the next row's first.
            slot = (y + _WATER_RANGE) * row_stride + (x + _WATER_RANGE)
            vertices[slot] = (
                x * 0.5, (y + off_y - off_x) * 0.5,
                1.0, 1.0, 1.0, alpha,
                0.0, 0.0, 0.0,
                float(x), float(y), water_height,
            )

    indices = _grid_strip_indices(2 * _WATER_RANGE, row_stride, row_stride)
    return Mesh(stride=12, vertices=vertices, indices=indices, offset=(off_x, off_y))