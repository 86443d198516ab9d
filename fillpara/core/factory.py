"""Component Factory for strategy instantiation.

The Factory Pattern allows the application to instantiate
different strategy implementations at runtime based on
configuration or environment variables.
"""

import logging

from fillpara.core.config import Settings, get_settings
from fillpara.interfaces.commenter import BaseCommenter
from fillpara.interfaces.paragraph import BaseParagraphFiller, BaseParagraphLocator
from fillpara.strategies.commenters import LanguageTableCommenter, PlainTextCommenter
from fillpara.strategies.paragraph import CommentParagraphLocator, GreedyParagraphFiller

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        factory = ComponentFactory(get_settings())

        commenter = factory.get_commenter()
        locator = factory.get_locator()
        filler = factory.get_filler()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._commenter_cache: BaseCommenter | None = None
        self._locator_cache: BaseParagraphLocator | None = None
        self._filler_cache: BaseParagraphFiller | None = None

    @property
    def settings(self) -> Settings:
        """Return the settings this factory was built with."""
        return self._settings

    def get_commenter(self, commenter_type: str | None = None) -> BaseCommenter:
        """Get a commenter instance based on the specified type.

        Args:
            commenter_type: The commenter type to instantiate. If None, uses settings.

        Returns:
            A BaseCommenter implementation instance.

        Raises:
            ValueError: If the commenter type is unknown.
        """
        if self._commenter_cache is None or commenter_type is not None:
            commenter_type = commenter_type or self._settings.commenter_type

            logger.info(f"Instantiating commenter: {commenter_type}")

            match commenter_type:
                case "language_table":
                    self._commenter_cache = LanguageTableCommenter(
                        overrides=self._settings.comment_prefix_overrides,
                    )
                case "plain":
                    self._commenter_cache = PlainTextCommenter()
                case _:
                    raise ValueError(
                        f"Unknown commenter type: {commenter_type}. "
                        f"Valid options: 'language_table', 'plain'"
                    )

        return self._commenter_cache

    def get_locator(self) -> BaseParagraphLocator:
        """Get the paragraph locator instance."""
        if self._locator_cache is None:
            logger.info("Instantiating paragraph locator")
            self._locator_cache = CommentParagraphLocator()

        return self._locator_cache

    def get_filler(self) -> BaseParagraphFiller:
        """Get the paragraph filler instance."""
        if self._filler_cache is None:
            logger.info("Instantiating paragraph filler")
            self._filler_cache = GreedyParagraphFiller()

        return self._filler_cache

    def clear_cache(self) -> None:
        """Clear all cached component instances.

        This forces new instances to be created on next access.
        Useful for testing or when settings change.
        """
        self._commenter_cache = None
        self._locator_cache = None
        self._filler_cache = None
        logger.debug("Component factory cache cleared")


# Global factory instance
_factory: ComponentFactory | None = None


def get_factory() -> ComponentFactory:
    """Get or create the global ComponentFactory instance.

    Returns:
        The singleton ComponentFactory instance.
    """
    global _factory
    if _factory is None:
        _factory = ComponentFactory()
    return _factory
