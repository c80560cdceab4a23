"""Command-line entry point that opens the game window."""

from __future__ import annotations

import argparse

import pygame

from .game import Game

FRAME_RATE = 60


def main(argv: list[str] | None = None) -> int:
    """Run the game until the player quits."""
    parser = argparse.ArgumentParser(prog="pixeltetris", description="A falling-block puzzle game.")
    parser.parse_args(argv)

    game = Game()
    game.initialize()
    clock = pygame.time.Clock()
    try:
        while not game.is_game_exiting():
            game.run()
            clock.tick(FRAME_RATE)
    finally:
        game.exit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())