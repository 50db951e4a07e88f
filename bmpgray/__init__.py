"""Grayscale conversion for uncompressed BMP images, plus a pairwise-sum timing demo."""

__version__ = "0.1.0"
__all__ = ["bmp", "grayscale", "pairsum"]