"""A pixel-art falling-block puzzle game on pygame, with its rules usable without a window."""

__version__ = "1.0.0"