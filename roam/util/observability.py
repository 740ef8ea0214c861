"""Observability configuration using Logfire.

Logfire provides structured logging and tracing on top of OpenTelemetry.

Usage:
    import logfire

    # Structured logging
    logfire.info("Favorite added", post_id=str(post_id), user_id=str(user_id))

    # Manual spans for critical operations
    with logfire.span("itinerary_service.update", itinerary_id=str(itinerary_id)):
        ...
"""

from typing import Any

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from roam.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending
    - If a token is present, logs are sent to Logfire cloud by default
    - OBSERVABILITY__SEND_TO_LOGFIRE overrides either way

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs: dict[str, Any] = {
        "service_name": "roam",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Traces every SQL query with its duration.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")
