"""Walk through brush-based maps drawn as lit, textured walls and floors."""

__version__ = "0.1.0"