"""Container for tests: mocks everywhere unless a component is unmocked."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from userapi.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container for tests.

    Settings come from the environment prepared in ``tests/conftest.py``.

    Args:
        unmock: Components to run with their production implementation

    Raises:
        ValueError: If an unknown component is named

    Examples:
        build_test_container()                        # in-memory, no SMTP
        build_test_container(unmock={"persistence"})  # real PostgreSQL
    """
    unmock = unmock or set()
    known = {p.__mock_component__ for p in PROVIDERS} - {None}
    if unknown := unmock - known:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=base.__mock_component__ is not None
            and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
