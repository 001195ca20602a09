"""The interactive wire-frame viewer and its command-line entry point."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from fdf.charclass import to_upper
from fdf.errors import ErrorKind, FdfError
from fdf.mapfile import HeightMap, check_filename, read_map
from fdf.render import Canvas, render
from fdf.view import Key, View

TITLE = "Fil de Fer"


class Viewer:
    """Shows a height map and reacts to keys by changing the view."""

    def __init__(
        self,
        heightmap: HeightMap,
        view: Optional[View] = None,
        canvas: Optional[Canvas] = None,
    ) -> None:
        self.heightmap = heightmap
        self.view = view if view is not None else View()
        self.canvas = canvas if canvas is not None else Canvas()
        self.running = True

    def redraw(self) -> None:
        """Draw the map afresh on a blank canvas."""
        self.canvas.clear()
        render(self.canvas, self.heightmap, self.view)

    def on_key(self, key: int) -> bool:
        """Apply ``key``; return False and stop running when it asks to quit."""
        if not self.view.handle_key(key):
            self.running = False
            return False
        self.redraw()
        return True

    def run(self) -> None:
        """Open a window and show the map until it is closed or Escape is pressed."""
        import pygame

        try:
            pygame.init()
            screen = pygame.display.set_mode((self.canvas.width, self.canvas.height))
        except pygame.error as exc:
            pygame.quit()
            raise FdfError(ErrorKind.MEMORY, str(exc)) from exc
        try:
            pygame.display.set_caption(TITLE)
            self.redraw()
            self._present(pygame, screen)
            while self.running:
                for event in pygame.event.wait(), *pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                        break
                    if event.type == pygame.KEYDOWN:
                        if self.on_key(_translate_key(pygame, event)):
                            self._present(pygame, screen)
                        else:
                            break
        finally:
            pygame.quit()

    def _present(self, pygame, screen) -> None:
        size = (self.canvas.width, self.canvas.height)
        surface = pygame.image.frombuffer(bytes(self.canvas), size, "RGB")
        screen.blit(surface, (0, 0))
        pygame.display.flip()


def _translate_key(pygame, event) -> int:
    special = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
    }
    if event.key in special:
        return int(special[event.key])
    if 32 <= event.key < 127 and event.mod & pygame.KMOD_SHIFT:
        return int(to_upper(event.key))
    return int(event.key)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the map file named by the single argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 0
    path = args[0]
    try:
        if not check_filename(path):
            raise FdfError(ErrorKind.OPEN_FAILED, f"{path} is not a .fdf map")
        heightmap = read_map(path)
        Viewer(heightmap).run()
    except FdfError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())