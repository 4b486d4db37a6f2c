"""Dependency injection wiring.

``PROVIDERS`` lists one entry per layer or component. Entries with
subclasses are swappable components (persistence, email); the subclass
is picked by its ``__is_mock__`` flag.
"""

from typing import Type

from userapi.util.di.application import ProdApplicationProvider
from userapi.util.di.base import Component, ProviderBase
from userapi.util.di.core import ProdConfigProvider
from userapi.util.di.domain import ProdDomainProvider
from userapi.util.di.infrastructure import (
    EmailProvider,
    PersistenceProvider,
    ProdEmailProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    EmailProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the class to instantiate.

    Raises:
        ValueError: If the component has no implementation of the requested kind
    """
    implementations = {
        getattr(cls, "__is_mock__", False): cls for cls in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
        ) from None


__all__ = [
    "Component",
    "EmailProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
