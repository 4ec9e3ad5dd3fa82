"""Train catalog loader."""

import logging
from typing import Any

from pydantic import ValidationError

from train_search.adapters.config.app_config import AppConfig
from train_search.adapters.schemas import TrainPayload
from train_search.domain.errors import InvalidDataError
from train_search.domain.models import Train

logger = logging.getLogger(__name__)


class TrainCatalogLoader:
    """Loads seed trains from the TOML catalog named in the app config.

    Catalog entries use the same shape as the POST /trains body::

        [[trains]]
        name = "Express1"

        [[trains.stops]]
        station = "A"
        distanceFromPrevious = 0
        departureTime = "08:00"
    """

    @staticmethod
    def load_train_from_data(train_data: Any, position: int) -> Train:
        """Validate a single catalog entry and convert it to a Train."""
        try:
            payload = TrainPayload.model_validate(train_data)
        except ValidationError as e:
            name = train_data.get("name") if isinstance(train_data, dict) else None
            label = f"'{name}'" if name else f"#{position + 1}"
            raise InvalidDataError(f"Train {label} in catalog is invalid: {e}") from e
        return payload.to_domain()

    @staticmethod
    def load(config: AppConfig) -> list[Train]:
        """Load every train of the configured catalog, in file order."""
        trains_data = config.load_trains_data()
        trains = [
            TrainCatalogLoader.load_train_from_data(train_data, position)
            for position, train_data in enumerate(trains_data)
        ]
        if trains:
            logger.info(f"Loaded {len(trains)} train(s) from {config.trains_file}")
        return trains
