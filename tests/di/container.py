"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from roam.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables, so integration runs pick
    up DATABASE__URL the same way the application does.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.

    Returns:
        Configured test container

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit tests - in-memory repositories
        container = build_test_container()

        # Integration tests - real PostgreSQL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = base.__mock_component__
        if component_name is None:
            # Concrete provider - always use as-is
            provider_class = get_provider(base, use_mock=False)
        else:
            provider_class = get_provider(
                base, use_mock=component_name not in unmock
            )

        # Settings comes from DI, so providers take no arguments
        provider_instances.append(provider_class())

    return make_async_container(*provider_instances)


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no provider declares.

    Raises:
        ValueError: If unknown components are named
    """
    known = {p.__mock_component__ for p in PROVIDERS if p.__mock_component__}
    unknown = set(unmock) - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
