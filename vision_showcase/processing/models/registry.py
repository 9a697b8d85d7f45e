"""
Model Registry
--------------

Maps catalog keys to the provider classes able to build them.
Exact match first, then longest prefix match.
"""

from typing import Dict, Optional, Type

from .contracts import Provider


_model_registry: Dict[str, Type[Provider]] = {}


def register_provider(model_pattern: str, provider_class: Type[Provider]) -> None:
    """Register a provider for a key or key prefix (e.g. 'mobilenet')."""
    _model_registry[model_pattern] = provider_class


def get_provider(model_key: str) -> Optional[Type[Provider]]:
    """
    Get the provider class for a model key.

    Args:
        model_key: Catalog key

    Returns:
        Provider class or None if nothing matches
    """
    if model_key in _model_registry:
        return _model_registry[model_key]

    best_match = None
    best_length = 0
    for pattern, provider_class in _model_registry.items():
        if model_key.startswith(pattern) and len(pattern) > best_length:
            best_match = provider_class
            best_length = len(pattern)

    return best_match


class ModelRegistry:
    """Static access to the registry."""

    @staticmethod
    def register(model_pattern: str, provider_class: Type[Provider]) -> None:
        register_provider(model_pattern, provider_class)

    @staticmethod
    def get_provider(model_key: str) -> Optional[Type[Provider]]:
        return get_provider(model_key)

    @staticmethod
    def clear() -> None:
        _model_registry.clear()
