"""In-memory schedule store."""

import logging
from collections.abc import Iterable

from train_search.domain.models import Train

logger = logging.getLogger(__name__)


class InMemoryTrainRepository:
    """Train repository that keeps records in process memory, in insertion order."""

    def __init__(self, trains: Iterable[Train] | None = None) -> None:
        """Initialize, optionally seeding the store with existing trains."""
        self._trains: list[Train] = list(trains or [])

    async def fetch_all_trains(self) -> list[Train]:
        """Return a copy so later saves never alter a snapshot in use."""
        return list(self._trains)

    async def save_train(self, train: Train) -> Train:
        """Append a train and return it."""
        self._trains.append(train)
        logger.debug(f"Stored train '{train.name}' ({len(self._trains)} total)")
        return train
