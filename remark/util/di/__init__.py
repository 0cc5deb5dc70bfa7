"""Dependency injection module.

Every entry in PROVIDERS is either a concrete provider, used as-is, or a
mockable component base whose subclasses are the production and mock
implementations.
"""

from typing import Type

from remark.util.di.application import ProdApplicationProvider
from remark.util.di.base import Component, ProviderBase
from remark.util.di.core import ProdConfigProvider
from remark.util.di.domain import ProdDomainProvider
from remark.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from remark.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable: the comment store
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to the provider class to instantiate.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the ``__is_mock__`` implementation of a component

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If the component has no such implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
