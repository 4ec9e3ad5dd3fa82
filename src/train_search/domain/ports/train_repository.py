"""Train repository port."""

from typing import Protocol

from train_search.domain.models.train import Train


class TrainRepository(Protocol):
    """Port for the schedule store holding every train record."""

    async def fetch_all_trains(self) -> list[Train]:
        """Return a snapshot of all stored trains, in insertion order."""
        ...

    async def save_train(self, train: Train) -> Train:
        """Store a train and return it."""
        ...
