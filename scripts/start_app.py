#!/usr/bin/env python3
"""Start the Reef auth API with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from reef.config import Settings
from reef.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        logfire.info("Starting Reef auth API", environment=settings.environment)

        # Start uvicorn server
        # The factory builds the app and its DI container inside the server process
        uvicorn.run(
            "reef.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
