"""FastAPI dependencies for dependency injection.

Provides reusable dependencies for routes including:
- Component factory
- Fill paragraph action
"""

import logging

from fastapi import Depends

from fillpara.actions import FillParagraphAction
from fillpara.core.factory import ComponentFactory, get_factory

logger = logging.getLogger(__name__)


def get_component_factory() -> ComponentFactory:
    """Dependency returning the global component factory."""
    return get_factory()


def get_fill_action(
    factory: ComponentFactory = Depends(get_component_factory),
) -> FillParagraphAction:
    """Dependency for the fill paragraph action.

    Args:
        factory: Component factory supplying locator, filler and commenter.

    Returns:
        A FillParagraphAction bound to the factory.
    """
    return FillParagraphAction(factory)
