"""Factory for creating annotators with registration-based pattern.

Supports the Open/Closed Principle - new providers can be added
without modifying existing code by using the register decorator.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from core.errors import FatalConfig
from core.types import ProviderConfig

from .base import Annotator

# Type variable for annotator classes
T = TypeVar("T", bound=Annotator)


class AnnotatorRegistry:
    """Registry for annotator classes.

    Provides a central registration point for provider implementations.
    The provider is chosen once, from ProviderConfig.provider; nothing
    downstream branches on it.

    Example:
        # Register a new provider
        @AnnotatorRegistry.register("custom")
        class CustomAnnotator(Annotator):
            ...

        # Create an instance
        annotator = AnnotatorRegistry.create(ProviderConfig(provider="custom"))
    """

    _annotators: dict[str, type[Annotator]] = {}
    _default_kwargs: dict[str, dict[str, Any]] = {}

    @classmethod
    def register(
        cls,
        mode: str,
        **default_kwargs: Any,
    ) -> Callable[[type[T]], type[T]]:
        """Register an annotator class for a provider.

        Args:
            mode: Provider identifier (e.g., 'google', 'microsoft').
            **default_kwargs: Default keyword arguments for this annotator.

        Returns:
            Decorator function that registers the class.

        Raises:
            ValueError: If mode is already registered.
        """

        def decorator(annotator_class: type[T]) -> type[T]:
            if mode in cls._annotators:
                raise ValueError(f"Mode '{mode}' is already registered")
            cls._annotators[mode] = annotator_class
            cls._default_kwargs[mode] = default_kwargs
            return annotator_class

        return decorator

    @classmethod
    def create(cls, config: ProviderConfig, **kwargs: Any) -> Annotator:
        """Create the annotator selected by config.

        Args:
            config: Provider configuration resolved at startup.
            **kwargs: Additional arguments passed to annotator constructor.

        Returns:
            Configured Annotator instance.

        Raises:
            FatalConfig: If the provider is not registered.
        """
        annotator_class = cls.get_annotator_class(config.provider)

        # Merge default kwargs with provided kwargs
        merged_kwargs = {**cls._default_kwargs.get(config.provider, {}), **kwargs}

        return annotator_class(config, **merged_kwargs)

    @classmethod
    def list_modes(cls) -> list[str]:
        """Return list of registered providers."""
        return list(cls._annotators.keys())

    @classmethod
    def get_annotator_class(cls, mode: str) -> type[Annotator]:
        """Get the annotator class for a provider.

        Raises:
            FatalConfig: If mode is not registered.
        """
        if mode not in cls._annotators:
            valid = ", ".join(cls.list_modes())
            raise FatalConfig(f"Unknown provider: {mode}. Valid providers: {valid}")
        return cls._annotators[mode]


# Register built-in annotators
# Import here to avoid circular imports
from .google_annotator import GoogleVisionAnnotator  # noqa: E402
from .microsoft_annotator import MicrosoftVisionAnnotator  # noqa: E402

AnnotatorRegistry.register("google")(GoogleVisionAnnotator)
AnnotatorRegistry.register("microsoft")(MicrosoftVisionAnnotator)
