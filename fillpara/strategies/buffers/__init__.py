"""Concrete text buffer implementations."""

from fillpara.strategies.buffers.memory import InMemoryTextBuffer

__all__ = [
    "InMemoryTextBuffer",
]
