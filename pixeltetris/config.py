"""Game-wide constants and the user-adjustable settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

WINDOW_TITLE = "Pixeltetris"

# Logical resolution: everything is laid out against these and then scaled.
LOGICAL_WINDOW_WIDTH = 640
LOGICAL_WINDOW_HEIGHT = 360
AVAILABLE_RESOLUTION_SCALINGS: tuple[float, ...] = (0.25, 0.5, 1, 1.5, 2, 3)
STARTING_RESOLUTION_SCALING_INDEX = 4
POSSIBLE_RESOLUTION_SCALINGS = len(AVAILABLE_RESOLUTION_SCALINGS)

# Board layout
WIDTH_TO_PLAYFIELD = 242  # pixels
HEIGHT_TO_PLAYFIELD = 34  # pixels
BLOCK_SIZE = 16  # pixels
PLAYFIELD_WIDTH = 10  # blocks
TRUE_PLAYFIELD_HEIGHT = 20  # blocks
PLAYFIELD_HEIGHT = 22  # visible playfield plus two spawn rows above it
FRAME_WIDTH = 6  # pixels
FRAME_SPRITE_SIZE = 8  # pixels
BOARD_HEIGHT = 2  # pixels from the bottom
MATRIX_BLOCKS = 5  # side of the matrix holding a tetromino

# Preview boxes
NEXT_BOX_X = 405
NEXT_BOX_Y = 10
HOLD_BOX_X = 150
HOLD_BOX_Y = 10

# Timing
WAIT_TIME = 1000  # milliseconds

# Visuals
DEFAULT_TEXT_COLOR = (0x00, 0x00, 0x00, 0xFF)
BACKGROUND_LIGHT = (0xF9, 0xE6, 0xCF)
TRANSPARENCY_ALPHA = 100

ASSETS_DIR = Path(__file__).resolve().parent / "assets"


@dataclass
class Settings:
    """Options the player can change while the game runs."""

    resolution_scaling: float = AVAILABLE_RESOLUTION_SCALINGS[STARTING_RESOLUTION_SCALING_INDEX]
    ghost_piece_enabled: bool = True

    def window_size(self) -> tuple[int, int]:
        """Real window size in pixels for the current scaling."""
        return (
            int(LOGICAL_WINDOW_WIDTH * self.resolution_scaling),
            int(LOGICAL_WINDOW_HEIGHT * self.resolution_scaling),
        )

    def scaling_index(self) -> int:
        """Index of the current scaling among the available ones."""
        matches = [
            index
            for index, scaling in enumerate(AVAILABLE_RESOLUTION_SCALINGS)
            if scaling == self.resolution_scaling
        ]
        if not matches:
            raise ValueError(f"unsupported resolution scaling: {self.resolution_scaling}")
        return matches[-1]


settings = Settings()


def asset_path(name: str) -> Path:
    """Path of a bundled asset file."""
    return ASSETS_DIR / name