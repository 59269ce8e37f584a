"""A side-scrolling space shooter on an emulated character-cell screen, with sprite demos."""

__version__ = "1.0.0"