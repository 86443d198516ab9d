"""Comment-aware paragraph reflow for source-code buffers."""

__version__ = "0.1.0"
