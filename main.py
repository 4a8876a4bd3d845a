"""
Menu Fetch Service

Entry point for the application.
Serves the HTTP API on all interfaces so the service is reachable behind
a platform-assigned PORT.
"""
import logging
import sys

import uvicorn

from config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

# Reduce noise from external libraries
logging.getLogger("aiohttp").setLevel(logging.WARNING)
logging.getLogger("asyncio").setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the API with uvicorn."""
    logger.info(f"Menu fetch service starting on {settings.host}:{settings.port}")
    uvicorn.run(
        "api:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # Keep the logging configured above
    )


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Service stopped by user")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)
