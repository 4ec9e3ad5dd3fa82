"""Application services (use cases)."""

from train_search.application.services.route_search_service import RouteSearchService
from train_search.application.services.train_registration_service import (
    TrainRegistrationService,
)

__all__ = ["RouteSearchService", "TrainRegistrationService"]
