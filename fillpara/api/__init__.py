"""FastAPI routers and dependencies."""

from fillpara.api.deps import (
    get_component_factory,
    get_fill_action,
)
from fillpara.api.paragraphs import router as paragraphs_router

__all__ = [
    "get_component_factory",
    "get_fill_action",
    "paragraphs_router",
]
