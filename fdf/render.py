"""Rasterising a height map as a wire frame onto an RGB canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from fdf.mapfile import HeightMap
from fdf.view import HEIGHT, WIDTH, View

Point = Tuple[float, float]
GridPoint = Tuple[int, int, int]
Edge = Tuple[GridPoint, GridPoint, int]


@dataclass
class Canvas:
    """A fixed-size image of 24-bit RGB pixels, all black when created."""

    width: int = WIDTH
    height: int = HEIGHT
    _pixels: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas size must be positive, got {self.width}x{self.height}")
        self._pixels = bytearray(self.width * self.height * 3)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside the canvas")
        return (y * self.width + x) * 3

    def put(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column ``x``, row ``y`` to ``color`` (0xRRGGBB)."""
        offset = self._offset(x, y)
        self._pixels[offset:offset + 3] = bytes(
            ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
        )

    def get(self, x: int, y: int) -> int:
        """Return the colour of the pixel at column ``x``, row ``y`` as 0xRRGGBB."""
        offset = self._offset(x, y)
        red, green, blue = self._pixels[offset:offset + 3]
        return (red << 16) | (green << 8) | blue

    def clear(self) -> None:
        """Turn every pixel black."""
        self._pixels[:] = bytes(len(self._pixels))

    def __bytes__(self) -> bytes:
        return bytes(self._pixels)


def isometric(x: float, y: float, z: int, view: View) -> Point:
    """Return the screen position of grid point ``(x, y)`` at altitude ``z``.

    The point is scaled, projected with the view's angle and then shifted.
    The vertical coordinate is computed from the already projected
    horizontal one.
    """
    x *= view.scale
    y *= view.scale
    x = (x - y) * math.cos(view.angle)
    y = (x + y) * math.sin(view.angle) - z
    return x + view.shift_x, y + view.shift_y


def _flat(x: float, y: float, view: View) -> Point:
    return x * view.scale + view.shift_x, y * view.scale + view.shift_y


def edges(heightmap: HeightMap) -> Iterator[Edge]:
    """Yield every wire of the map as ``((x1, y1, z1), (x2, y2, z2), colour)``.

    Rows are walked top to bottom and columns left to right; each point
    gives its wire to the right, then its wire downwards. A wire takes the
    colour of its end point, or of its start point when the end is lower.
    """
    z, colors = heightmap.z, heightmap.colors
    for row in range(heightmap.height):
        for col in range(heightmap.width):
            neighbours = []
            if col < heightmap.width - 1:
                neighbours.append((col + 1, row))
            if row < heightmap.height - 1:
                neighbours.append((col, row + 1))
            for col2, row2 in neighbours:
                z1, z2 = z[row][col], z[row2][col2]
                color = colors[row][col] if z2 < z1 else colors[row2][col2]
                yield (col, row, z1), (col2, row2, z2), color


def _segment_points(start: Point, end: Point) -> Iterator[Point]:
    x1, y1 = start
    x2, y2 = end
    steps = int(max(abs(x2 - x1), abs(y2 - y1)))
    if steps == 0:
        return
    step_x = (x2 - x1) / steps
    step_y = (y2 - y1) / steps
    for _ in range(steps + 1):
        if not (int(x2 - x1) or int(y2 - y1)):
            return
        yield x1, y1
        x1 += step_x
        y1 += step_y


def draw_segment(canvas: Canvas, start: Point, end: Point, color: int) -> None:
    """Draw a line from ``start`` towards ``end``, the end point itself excluded.

    Points falling outside the canvas are skipped.
    """
    for x, y in _segment_points(start, end):
        if x < 0 or y < 0:
            continue
        col, row = int(x), int(y)
        if col < canvas.width and row < canvas.height:
            canvas.put(col, row, color)


def render(
    canvas: Canvas,
    heightmap: HeightMap,
    view: View,
    top_down: Optional[bool] = None,
) -> Canvas:
    """Draw every wire of ``heightmap`` onto ``canvas`` and return the canvas.

    ``top_down`` chooses the flat projection over the isometric one; by
    default the view decides.
    """
    if top_down is None:
        top_down = view.top_down
    for (x1, y1, z1), (x2, y2, z2), color in edges(heightmap):
        if top_down:
            start, end = _flat(x1, y1, view), _flat(x2, y2, view)
        else:
            start, end = isometric(x1, y1, z1, view), isometric(x2, y2, z2, view)
        draw_segment(canvas, start, end, color)
    return canvas