"""Main entry point serving the station search API."""

import asyncio
import logging
import sys

import uvicorn

from nearby_departures.adapters.config import AppConfig
from nearby_departures.adapters.web import create_app
from nearby_departures.bootstrap import create_client_search
from nearby_departures.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def load_config() -> AppConfig:
    """Load configuration from the environment and the optional TOML file."""
    config = AppConfig()
    try:
        config.load_toml_overrides()
    except (FileNotFoundError, ValueError) as e:
        configure_logging(config.log_level)
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    return config


async def main(config: AppConfig | None = None) -> None:
    """Main application entry point."""
    config = config or load_config()
    configure_logging(config.log_level)

    app = create_app(config, search_factory=create_client_search)
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
        )
    )
    logger.info(f"Serving station search on http://{config.host}:{config.port}/api/stations")
    await server.serve()


def run() -> None:
    """Synchronous entry point for the server command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
