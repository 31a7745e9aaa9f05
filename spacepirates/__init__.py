"""A small top-down arcade space shooter: a ship, its bullets, falling enemies and the game loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]