"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from roam.config import Settings
from roam.util.di import PROVIDERS, get_provider
from roam.util.observability import configure_logfire


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build production container (all prod implementations).

    Logfire is configured here so that every entry point gets the same
    observability setup before the first span is opened.

    Args:
        settings: Settings used for Logfire; loaded from the environment
            when omitted. The container provides its own Settings instance.

    Returns:
        Configured DI container with production providers
    """
    configure_logfire(settings or Settings())

    # Get provider instances - all are instantiated without arguments
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances)
