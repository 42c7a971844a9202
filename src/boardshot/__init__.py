"""Best-move suggestions from chessboard images."""

__version__ = "1.0.0"
