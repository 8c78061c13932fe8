"""ASCII rectangles, a 4x4 skyscraper puzzle solver and numbers spelled out in words."""

__version__ = "0.1.0"

__all__ = ["dictionary", "numwords", "rectangle", "skyscraper"]