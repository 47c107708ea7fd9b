# committee_service/run_api.py
"""Run the committee governance HTTP API."""

import logging

import uvicorn

from committee_service.api.main import app
from committee_service.infrastructure.postgres.config import get_api_settings

settings = get_api_settings()

# Setup logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    logger.info("=" * 80)
    logger.info("COMMITTEE GOVERNANCE API")
    logger.info("=" * 80)
    logger.info(f"Listening on {settings.api_host}:{settings.api_port}")
    logger.info("=" * 80)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
