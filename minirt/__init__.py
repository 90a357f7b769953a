"""A small ray tracer that parses .rt scene files, renders them and writes BMP images."""

__version__ = "0.1.0"
__all__ = ["__version__"]