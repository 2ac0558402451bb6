"""A tile-based Sokoban puzzle game on pygame: rooms, sprites, input, levels and the player."""

__version__ = "0.1.0"