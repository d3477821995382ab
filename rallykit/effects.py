"""Weather particles, damage tint and checkpoint styling used while racing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from rallykit.geometry import Mesh

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]

RAINDROP_COLOR: Vec4 = (0.5, 0.5, 0.5, 0.4)
RAINDROP_WIDTH = 0.015

SNOWFLAKE_BOX_SIZE = 0.175
# Snowflakes older than this are invisible; must be greater than 1.
SNOWFLAKE_MAXLIFE = 4.5

DAMAGE_INDICATOR_ALPHA = 0.5

# Floats per rain vertex: colour (4), normal (3, unused), position (3).
_RAIN_STRIDE = 10
_RAIN_VERTICES_PER_DROP = 6


@dataclass
class RainDrop:
    """A falling raindrop: start point, fall vector and how far along it is."""

    drop_pt: Vec3
    drop_vect: Vec3
    life: float
    prevlife: float = 0.0


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(a: Vec3, k: float) -> Vec3:
    return (a[0] * k, a[1] * k, a[2] * k)


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _length(a: Vec3) -> float:
    return math.sqrt(a[0] * a[0] + a[1] * a[1] + a[2] * a[2])


def _resized(a: Vec3, size: float) -> Vec3:
    length = _length(a)
    if length == 0.0:
        return (math.nan, math.nan, math.nan)
    return _scale(a, size / length)


def build_rain_mesh(drops: Iterable[RainDrop], campos: Vec3, campos_prev: Vec3) -> Mesh:
    """Build camera-facing streaks for the raindrops.

    Each drop becomes six vertices (r, g, b, a, nx, ny, nz, x, y, z) forming a
    strip from its previous to its current position; only the middle pair is
    visible. Each strip is followed by a (0, 0) restart pair of indices.
    """
    offset = _sub(campos, campos_prev)
    red, green, blue, alpha = RAINDROP_COLOR
    vertices: list[tuple[float, ...]] = []
    indices: list[int] = []
    for number, drop in enumerate(drops):
        start = _add(_add(drop.drop_pt, _scale(drop.drop_vect, drop.prevlife)), offset)
        end = _add(drop.drop_pt, _scale(drop.drop_vect, drop.life))
        zag = _resized(_cross(_sub(campos, drop.drop_pt), drop.drop_vect), RAINDROP_WIDTH)
        base = number * _RAIN_VERTICES_PER_DROP
        for j in range(_RAIN_VERTICES_PER_DROP):
            sign = j // 2 - 1.0
            pt = start if j % 2 == 0 else end
            x, y, z = _add(pt, _scale(zag, sign))
            visible = alpha if j in (2, 3) else 0.0
            vertices.append((red, green, blue, visible, 0.0, 0.0, 0.0, x, y, z))
            indices.append(base + j)
        indices.extend((0, 0))
    return Mesh(stride=_RAIN_STRIDE, vertices=vertices, indices=indices)


def snowflake_alpha(life: float) -> float:
    """Opacity of a snowflake of the given age: solid at first, then fading out."""
    if life > SNOWFLAKE_MAXLIFE:
        return 0.0
    if life > 1.0:
        return (life - SNOWFLAKE_MAXLIFE) / (1.0 - SNOWFLAKE_MAXLIFE)
    return 1.0


def snowflake_transform(
    drop_pt: Vec3, drop_vect: Vec3, life: float, campos: Vec3
) -> tuple[Vec3, Vec3]:
    """Return (position, scale) of the camera-facing quad drawn for a snowflake."""
    position = _add(drop_pt, _scale(drop_vect, life))
    zag = _cross(_sub(campos, drop_pt), drop_vect)
    length = _length(zag)
    if length != 0.0:
        zag = _scale(zag, SNOWFLAKE_BOX_SIZE / length)
    scale = (zag[0], zag[1], zag[2] + SNOWFLAKE_BOX_SIZE)
    return position, scale


def damage_color(damage: float) -> Vec4:
    """Tint of a damage indicator: white when unknown, green to red as damage rises."""
    damage = min(damage, 1.0)
    if damage < 0.0:
        red, green = 1.0, 1.0
        blue = 1.0
    elif damage < 0.5:
        red, green, blue = 2.0 * damage, 1.0, 0.0
    else:
        red, green, blue = 1.0, 2.0 * (1.0 - damage), 0.0
    return (red, green, blue, DAMAGE_INDICATOR_ALPHA)


def checkpoint_color_index(i: int, nextcp: int, count: int) -> int:
    """Colour slot of checkpoint i: 0 for the next one, 1 for the one after, 2 otherwise."""
    if i == nextcp:
        return 0
    after = int(math.fmod(nextcp + 1, count))
    if i == after:
        return 1
    return 2


def checkpoint_height(cprotate: float) -> float:
    """Height at which the checkpoint rings bob for the given animation phase."""
    return math.sin(cprotate * 6.0) * 7.0 + 8.0