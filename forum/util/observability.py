"""Logfire setup for the forum.

Services report through logfire directly: one span per tree operation
(``tree_mutation_service.insert``, ``tree_query_service.get_children``, ...)
with post ids and depths as attributes, and info/warn events for outcomes
such as truncated paths or lost insert races. SQL statements show up as
child spans once the engine is instrumented.
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import ObservabilitySettings, Settings

SERVICE_NAME = "forum"
SERVICE_VERSION = "0.1.0"


def _send_to_logfire(observability: ObservabilitySettings) -> bool:
    # Explicit setting wins; otherwise a token means cloud, no token console only
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process.

    Set ``OBSERVABILITY__LOGFIRE_TOKEN`` to ship telemetry to Logfire;
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` overrides the choice either way.

    Args:
        settings: Application settings
    """
    send = _send_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
        max_depth=settings.forum.max_depth,
        insert_attempts=settings.forum.insert_attempts,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement the tree store runs, including ancestor locks.

    Args:
        engine: The process-wide async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Tag SQL with the calling span
    )
    logfire.info("SQLAlchemy instrumented", service=SERVICE_NAME)
