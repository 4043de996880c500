"""Space Game — arcade dodge-and-shoot built with Python + Pygame."""

__version__ = "1.0.0"
