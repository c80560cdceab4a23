"""Images and rendered text that can be drawn on the renderer's screen."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import TYPE_CHECKING

import pygame

from .config import LOGICAL_WINDOW_WIDTH

if TYPE_CHECKING:
    from .renderer import Renderer


class TextureError(RuntimeError):
    """An image or a text could not be turned into a texture."""


def _wrap_lines(text: str, font: pygame.font.Font, limit: int) -> Iterator[str]:
    for paragraph in text.split("\n"):
        line = ""
        for word in paragraph.split(" "):
            candidate = f"{line} {word}" if line else word
            if line and font.size(candidate)[0] > limit:
                yield line
                line = word
            else:
                line = candidate
        yield line


class Texture:
    """A drawable surface together with its size."""

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer
        self.surface: pygame.Surface | None = None
        self.width = 0
        self.height = 0

    def free(self) -> None:
        if self.surface is not None:
            self.surface = None
            self.width = 0
            self.height = 0

    def _set_surface(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.width, self.height = surface.get_size()

    def load_from_image(self, path: str | PathLike[str]) -> None:
        """Replace the texture with an image file."""
        self.free()
        try:
            surface = pygame.image.load(str(path))
        except (OSError, pygame.error) as exc:
            raise TextureError(f"could not load image from path: {path}") from exc
        if pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        self._set_surface(surface)

    def load_from_text(self, text: str, font: pygame.font.Font, color) -> None:
        """Replace the texture with text, wrapped to the logical window width."""
        self.free()
        try:
            lines = [
                font.render(line, True, color)
                for line in _wrap_lines(text, font, LOGICAL_WINDOW_WIDTH)
            ]
        except pygame.error as exc:
            raise TextureError(f"could not render text: {exc}") from exc
        if len(lines) == 1:
            self._set_surface(lines[0])
            return
        width = max(line.get_width() for line in lines)
        height = sum(line.get_height() for line in lines)
        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        top = 0
        for line in lines:
            surface.blit(line, (0, top))
            top += line.get_height()
        self._set_surface(surface)

    def render(self, x: int, y: int, clip: pygame.Rect | None = None) -> None:
        """Draw with the top-left corner at (x, y), optionally a clip of the source."""
        if self.surface is not None:
            self.renderer.screen.blit(self.surface, (x, y), clip)

    def render_centered(self, x: int, y: int) -> None:
        if self.surface is not None:
            self.renderer.screen.blit(
                self.surface, (x - self.width // 2, y - self.height // 2)
            )

    def set_alpha(self, alpha: int) -> None:
        """Set the transparency used when drawing (255 is opaque)."""
        if self.surface is not None:
            self.surface.set_alpha(alpha)