"""Configuration adapters."""

from train_search.adapters.config.app_config import AppConfig
from train_search.adapters.config.train_catalog_loader import TrainCatalogLoader

__all__ = ["AppConfig", "TrainCatalogLoader"]
