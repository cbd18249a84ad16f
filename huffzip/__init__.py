"""Static Huffman coding for files and byte strings: bit I/O, code trees and a command line."""

__version__ = "0.1.0"
__all__ = ["bitio", "tree", "cli"]