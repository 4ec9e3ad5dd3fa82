"""Main entry point for the train search service."""

import asyncio
import logging
import sys

from train_search.adapters.config import AppConfig, TrainCatalogLoader
from train_search.adapters.storage import InMemoryTrainRepository
from train_search.adapters.web import StarletteWebAdapter
from train_search.application.services import RouteSearchService, TrainRegistrationService
from train_search.domain.errors import InvalidDataError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def build_web_adapter(config: AppConfig) -> StarletteWebAdapter:
    """Wire the schedule store, services and web adapter together.

    Exits the process when the configured train catalog cannot be loaded.
    """
    try:
        seed_trains = TrainCatalogLoader.load(config)
    except (FileNotFoundError, ValueError, InvalidDataError) as e:
        logger.error(f"Invalid train catalog: {e}")
        sys.exit(1)

    train_repo = InMemoryTrainRepository(seed_trains)
    search_service = RouteSearchService(train_repo)
    registration_service = TrainRegistrationService(train_repo)

    return StarletteWebAdapter(search_service, registration_service, config)


async def main(config: AppConfig | None = None) -> None:
    """Main application entry point."""
    config = config or AppConfig()
    logging.getLogger().setLevel(config.log_level.upper())

    web_adapter = build_web_adapter(config)

    try:
        await web_adapter.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await web_adapter.stop()


if __name__ == "__main__":
    asyncio.run(main())
