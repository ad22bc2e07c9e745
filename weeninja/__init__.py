"""A fruit-slicing arcade game: fruit, game state, models, menu, controls and window."""

__version__ = "0.1.0"