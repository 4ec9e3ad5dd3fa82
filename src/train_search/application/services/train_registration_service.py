"""Train registration service."""

import logging
from typing import TYPE_CHECKING

from train_search.domain.models import Train

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from train_search.domain.ports import TrainRepository


class TrainRegistrationService:
    """Adds validated trains to the schedule store and lists them."""

    def __init__(self, train_repository: "TrainRepository") -> None:
        """Initialize with a train repository."""
        self._train_repository = train_repository

    async def register(self, train: Train) -> Train:
        """Store a train that already passed request validation."""
        saved = await self._train_repository.save_train(train)
        logger.info(f"Registered train '{saved.name}' with {len(saved.stops)} stop(s)")
        return saved

    async def list_trains(self) -> list[Train]:
        """Return every stored train."""
        return await self._train_repository.fetch_all_trains()
