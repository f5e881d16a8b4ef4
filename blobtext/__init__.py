"""Text held as a doubly linked chain of blobs that can be split, joined and printed."""

__version__ = "0.1.0"
__all__ = ["__version__"]