"""Temple Golem, a tile-based pygame platformer with a map editor, plus small companion tools."""

__version__ = "0.4.35"