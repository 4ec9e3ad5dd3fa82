"""Adapters layer - external system integrations."""

from train_search.adapters.config import AppConfig, TrainCatalogLoader
from train_search.adapters.storage import InMemoryTrainRepository

__all__ = [
    "AppConfig",
    "InMemoryTrainRepository",
    "TrainCatalogLoader",
]
