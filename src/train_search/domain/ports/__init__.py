"""Ports (interfaces) for the ports-and-adapters architecture."""

from train_search.domain.ports.route_search_service import RouteSearchService
from train_search.domain.ports.server_adapter import ServerAdapter
from train_search.domain.ports.train_registration_service import TrainRegistrationService
from train_search.domain.ports.train_repository import TrainRepository

__all__ = [
    "RouteSearchService",
    "ServerAdapter",
    "TrainRegistrationService",
    "TrainRepository",
]
