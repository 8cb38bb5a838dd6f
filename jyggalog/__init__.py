"""A simple logging library, logical and ordered: levels, style bits and a fatal hook."""

__version__ = "0.1.0"
__all__ = ["logger", "demo"]