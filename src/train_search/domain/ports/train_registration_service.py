"""Train registration service port."""

from typing import Protocol

from train_search.domain.models.train import Train


class TrainRegistrationService(Protocol):
    """Port for adding trains to the schedule and listing them."""

    async def register(self, train: Train) -> Train:
        """Store a validated train."""
        ...

    async def list_trains(self) -> list[Train]:
        """Return every stored train."""
        ...
