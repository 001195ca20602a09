"""View parameters of the wire-frame display and the keys that change them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

WIDTH = 1400
HEIGHT = 1400

ZOOM_STEP = 2
ROTATION_STEP = 0.1
TRANSLATION_STEP = 40


class Key(IntEnum):
    """Key symbols the viewer responds to."""

    ESCAPE = 0xFF1B
    UP = 0xFF52
    DOWN = 0xFF54
    W = 0x57
    w = 0x77
    A = 0x41
    a = 0x61
    S = 0x53
    s = 0x73
    D = 0x44
    d = 0x64
    E = 0x45
    e = 0x65
    Q = 0x51
    q = 0x71
    T = 0x54
    t = 0x74


_ZOOMS = {Key.UP: ZOOM_STEP, Key.DOWN: -ZOOM_STEP}

_ROTATIONS = {
    Key.e: ROTATION_STEP,
    Key.E: ROTATION_STEP,
    Key.q: -ROTATION_STEP,
    Key.Q: -ROTATION_STEP,
}

_TRANSLATIONS = {
    Key.w: (0, -TRANSLATION_STEP),
    Key.W: (0, -TRANSLATION_STEP),
    Key.s: (0, TRANSLATION_STEP),
    Key.S: (0, TRANSLATION_STEP),
    Key.a: (-TRANSLATION_STEP, 0),
    Key.A: (-TRANSLATION_STEP, 0),
    Key.d: (TRANSLATION_STEP, 0),
    Key.D: (TRANSLATION_STEP, 0),
}

_TOP_DOWN_KEYS = (Key.t, Key.T)


@dataclass
class View:
    """Scale, rotation and offset of the projected map."""

    scale: int = 40
    angle: float = 0.8
    shift_x: int = 300
    shift_y: int = 300
    top_down: bool = False

    def zoom(self, key: int) -> None:
        """Grow the scale on Up, shrink it on Down."""
        self.scale += _ZOOMS.get(key, 0)

    def rotate(self, key: int) -> None:
        """Turn the projection angle up on E, down on Q."""
        self.angle += _ROTATIONS.get(key, 0.0)

    def translate(self, key: int) -> None:
        """Move the picture with W, A, S and D."""
        dx, dy = _TRANSLATIONS.get(key, (0, 0))
        self.shift_x += dx
        self.shift_y += dy

    def handle_key(self, key: int) -> bool:
        """Apply ``key`` to the view; return False when it asks to quit.

        T switches to the top-down projection; every other key returns to
        the isometric one.
        """
        if key == Key.ESCAPE:
            return False
        self.zoom(key)
        self.translate(key)
        self.rotate(key)
        self.top_down = key in _TOP_DOWN_KEYS
        return True