"""Two-player Tic Tac Toe: board rules, a click-driven session and a pygame window."""

__version__ = "0.1.0"
__all__ = ["board", "session", "textures", "app"]