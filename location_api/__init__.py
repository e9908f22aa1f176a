"""Location hierarchy resolution and geometry codec."""

__version__ = "0.1.0"
