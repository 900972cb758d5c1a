"""Logfire setup for applications built on equatable.

The comparator never talks to Logfire itself; the console demo configures
it and wraps its run in a span.
"""

import logfire

from equatable.config import Settings


def should_send_to_logfire(settings: Settings) -> bool:
    """Explicit EQUATABLE_OBSERVABILITY__SEND_TO_LOGFIRE wins, else a token enables it."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire with console output and optional cloud sending.

    Args:
        settings: Library settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    logfire.configure(
        service_name="equatable",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        send_to_logfire=send_to_logfire,
        comparison_mode=settings.comparison.mode.value,
    )
