"""Loading height maps: a grid of altitudes with an optional colour per point."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from fdf.errors import ErrorKind, FdfError
from fdf.hexcolor import hex_to_dec, is_hex
from fdf.lines import read_lines
from fdf.numconv import atoi
from fdf.strtransform import split, word_count

WHITE = 0xFFFFFF
GREEN = 0x8FCE00
RED = 0xF44336

MAP_SUFFIX = ".fdf"


@dataclass
class HeightMap:
    """Altitudes and colours indexed as ``[row][column]``."""

    z: List[List[int]]
    colors: List[List[int]]
    width: int

    def __post_init__(self) -> None:
        if len(self.z) != len(self.colors):
            raise ValueError("altitude and colour grids differ in height")
        for z_row, color_row in zip(self.z, self.colors):
            if len(z_row) != self.width or len(color_row) != self.width:
                raise ValueError("every row must hold exactly width cells")

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.z)


def default_color(z: int) -> int:
    """Colour of a point without its own: white at 0, red above, green below."""
    if z == 0:
        return WHITE
    return RED if z > 0 else GREEN


def parse_cell(token: str) -> Tuple[int, int]:
    """Parse ``altitude[,colour]`` into an altitude and a colour.

    A token with nothing between its commas counts as altitude 0.
    """
    parts = split(token, ",")
    if not parts:
        return 0, default_color(0)
    z = atoi(parts[0])
    if len(parts) > 1 and is_hex(parts[1]):
        return z, hex_to_dec(parts[1])
    return z, default_color(z)


def check_filename(filename: str) -> bool:
    """Accept a name whose text from its first dot on starts ``.fdf``.

    A name without any dot is accepted too.
    """
    dot = filename.find(".")
    if dot < 0:
        return True
    return MAP_SUFFIX.startswith(filename[dot:])


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from the lines of a map file.

    The first line fixes the width; a later line with fewer cells is an
    error, and cells beyond the width are ignored.
    """
    rows = list(lines)
    if not rows:
        raise FdfError(ErrorKind.OPEN_FAILED, "empty map")
    width = word_count(rows[0], " ")
    for row in rows[1:]:
        if word_count(row, " ") < width:
            raise FdfError(ErrorKind.OPEN_FAILED, "row shorter than the first")
    z_grid: List[List[int]] = []
    color_grid: List[List[int]] = []
    for row in rows:
        cells = [parse_cell(token) for token in split(row, " ")[:width]]
        z_grid.append([z for z, _ in cells])
        color_grid.append([color for _, color in cells])
    return HeightMap(z_grid, color_grid, width)


def read_map(path: Union[str, os.PathLike]) -> HeightMap:
    """Read and parse the map file at ``path``."""
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            lines = list(read_lines(stream))
    except OSError as exc:
        raise FdfError(ErrorKind.OPEN_FAILED, str(exc)) from exc
    return parse_map(lines)