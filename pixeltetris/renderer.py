"""Drawing onto the logical screen surface and presenting it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from .config import BACKGROUND_LIGHT, asset_path

if TYPE_CHECKING:
    from .texture import Texture


class Renderer:
    """Owns the logical screen surface, the background colour and the fonts."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.background: tuple[int, int, int] = BACKGROUND_LIGHT
        self.medium_font: pygame.font.Font | None = None
        self.big_font: pygame.font.Font | None = None

    def load_fonts(self) -> None:
        """Load the medium and big fonts from the assets."""
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self.medium_font = pygame.font.Font(str(asset_path("munro-small.ttf")), 30)
            self.big_font = pygame.font.Font(str(asset_path("munro.ttf")), 50)
        except (OSError, pygame.error) as exc:
            raise RuntimeError(f"could not load font: {exc}") from exc

    def set_background_color(self, r: int, g: int, b: int) -> None:
        self.background = (r, g, b)

    def clear_screen(self) -> None:
        self.screen.fill(self.background)

    def render_texture(self, texture: Texture, x: int, y: int) -> None:
        """Draw a texture centred on (x, y)."""
        texture.render_centered(x, y)

    def draw_highlight(self, x: int, y: int, width: int, height: int, alpha: int) -> None:
        """Blend a translucent white box over an area."""
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((255, 255, 255, alpha))
        self.screen.blit(overlay, (x, y))

    def update_screen(self) -> None:
        """Scale the logical screen onto the window and show it."""
        window = pygame.display.get_surface()
        if window is None:
            return
        if window is not self.screen:
            pygame.transform.scale(self.screen, window.get_size(), window)
        pygame.display.flip()