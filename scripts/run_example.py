#!/usr/bin/env python3
"""Run the example value-object demo with logging and Logfire configured."""

import sys

import logfire

from equatable.config import get_settings
from equatable.example.demo import run_demo
from equatable.util.logging import setup_logging
from equatable.util.observability import configure_logfire


def main() -> int:
    """Print the demo results and log any failure to Logfire."""
    settings = get_settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        with logfire.span("run_demo", comparison_mode=settings.comparison.mode.value):
            for line in run_demo():
                print(line)
        return 0

    except Exception as e:
        logfire.error(
            "Demo failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
