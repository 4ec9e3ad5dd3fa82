"""Schedule store adapters."""

from train_search.adapters.storage.in_memory_train_repository import InMemoryTrainRepository

__all__ = ["InMemoryTrainRepository"]
