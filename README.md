# fdf

A wire-frame viewer for height maps. A map is a plain text file: each line
is a row of the grid, and each space-separated token is the altitude of one
point. A token may carry a colour after a comma, written in hexadecimal
(`10,0xFF0000`). Points without a colour are drawn white at altitude zero,
red above zero and green below zero.

```
0 0 0 0
0 5 5 0
0 5,0x00FFFF 5 0
0 0 0 0
```

The first line fixes the width of the map. A later line with fewer points
is rejected; points beyond the width are ignored. An empty file is rejected.

## Installing

```
pip install .
```

This also installs `pygame`, which the viewer uses for its window.

## Running

```
fdf path/to/map.fdf
```

The command takes exactly one argument; with any other number of arguments
it exits with status 0 without opening a window. The name is checked from
its first dot on: that part must be a beginning of `.fdf` (so `map.fdf` is
accepted but `my.map.fdf` is not); a name with no dot is accepted.

When the file cannot be opened, has the wrong name or is malformed, a
message is printed to standard error and the command exits with status 4.
If the window cannot be opened it exits with status 2.

## Controls

| Key       | Action                                            |
|-----------|---------------------------------------------------|
| Up / Down | scale up / down by 2                              |
| W / S     | move the picture up / down by 40 pixels           |
| A / D     | move the picture left / right by 40 pixels        |
| E / Q     | increase / decrease the projection angle by 0.1   |
| T         | switch to the flat top-down view                  |
| Escape    | quit                                              |

Every key other than T and Escape redraws in the isometric view. Closing the
window also quits. The window is 1400 × 1400 pixels.

## Using it as a library

```python
from fdf.mapfile import read_map
from fdf.view import View
from fdf.render import Canvas, render

heightmap = read_map("map.fdf")
canvas = render(Canvas(), heightmap, View(), top_down=False)
print(hex(canvas.get(300, 300)))
```

- `fdf.mapfile`: `read_map(path)`, `parse_map(lines)` (any iterable of
  lines), `parse_cell(token)`, `check_filename(name)`, `default_color(z)` and
  the `HeightMap` data class.
- `fdf.view`: the `View` data class (`scale`, `angle`, `shift_x`, `shift_y`,
  `top_down`) with `handle_key(key)`, and the `Key` enum of key symbols.
- `fdf.render`: `Canvas` (an RGB pixel buffer with `put`, `get`, `clear`),
  `isometric`, `edges`, `draw_segment` and `render`.
- `fdf.app`: `Viewer`, which drives a pygame window, and `main(argv=None)`.
- `fdf.errors`: `FdfError`, raised for bad input, with an `ErrorKind` and an
  `exit_code`.

The package also carries small helper modules used by the loader:
`fdf.lines` (a chunked `LineReader`), `fdf.hexcolor`, `fdf.numconv`
(`atoi`, `itoa`), `fdf.strtransform` (`split`, `strtrim` and friends),
`fdf.cstr`, `fdf.charclass`, `fdf.memory`, `fdf.output` and `fdf.chain`
(a singly linked `LinkedList`).

## Running the tests

```
pip install .[test]
pytest
```