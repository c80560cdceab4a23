"""A selectable image button with a callback."""

from __future__ import annotations

from collections.abc import Callable
from os import PathLike
from typing import TYPE_CHECKING

from .texture import Texture

if TYPE_CHECKING:
    from .renderer import Renderer


class Button:
    """An image at a fixed position whose callback runs when it is chosen."""

    def __init__(
        self,
        renderer: Renderer,
        path: str | PathLike[str],
        callback: Callable[[], object],
        x: int = 0,
        y: int = 0,
    ) -> None:
        self.callback = callback
        self.x = x
        self.y = y
        self.texture = Texture(renderer)
        self.texture.load_from_image(path)
        self.width = self.texture.width
        self.height = self.texture.height

    def draw(self) -> None:
        self.texture.render(self.x, self.y)