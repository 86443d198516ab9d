"""Core configuration and factory components."""

from fillpara.core.config import Settings, get_settings
from fillpara.core.factory import ComponentFactory, get_factory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
    "get_factory",
]
