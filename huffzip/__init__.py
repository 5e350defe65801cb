"""Huffman-coding file compressor with optional password scrambling."""

__version__ = "0.1.0"
__all__ = ["__version__"]