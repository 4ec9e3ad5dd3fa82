"""Starlette web adapter for train registration and search."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from train_search.adapters.config import AppConfig
from train_search.adapters.schemas import SearchQuery, TrainPayload, to_field_errors
from train_search.domain.errors import TrainSearchError, UpstreamFetchError
from train_search.domain.ports import (
    RouteSearchService,
    ServerAdapter,
    TrainRegistrationService,
)

from .formatters import format_error, format_field_errors, format_itinerary, format_train
from .rate_limit_middleware import RateLimitMiddleware
from .request_logging_middleware import RequestLoggingMiddleware

if TYPE_CHECKING:
    from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal Server Error"


async def _http_exception_handler(_request: Request, exc: HTTPException) -> Response:
    """Answer 404, 405 and other HTTP errors with the JSON error body."""
    return JSONResponse(
        format_error(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


async def _server_error_handler(request: Request, exc: Exception) -> Response:
    """Log the failure and answer with a generic 500 that carries no internals."""
    if isinstance(exc, TrainSearchError):
        logger.error(
            f"{request.method} {request.url.path} failed [{exc.code}]: {exc.message}",
            exc_info=exc,
        )
    else:
        logger.error(
            f"Unexpected error on {request.method} {request.url.path}: {exc}", exc_info=exc
        )
    return JSONResponse(format_error(GENERIC_ERROR_MESSAGE), status_code=500)


class StarletteWebAdapter(ServerAdapter):
    """Starlette-based JSON API over the registration and search services."""

    def __init__(
        self,
        search_service: RouteSearchService,
        registration_service: TrainRegistrationService,
        config: AppConfig,
    ) -> None:
        """Initialize the web adapter.

        Args:
            search_service: Service answering direct route searches.
            registration_service: Service storing and listing trains.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        # Protocols can't be checked with isinstance, verify required methods exist
        if not callable(getattr(search_service, "search", None)):
            raise TypeError("search_service must implement RouteSearchService protocol")
        if not callable(getattr(registration_service, "register", None)) or not callable(
            getattr(registration_service, "list_trains", None)
        ):
            raise TypeError(
                "registration_service must implement TrainRegistrationService protocol"
            )

        self.search_service = search_service
        self.registration_service = registration_service
        self.config = config
        self._server: Any | None = None

    async def create_train(self, request: Request) -> Response:
        """POST /trains - validate and store a train."""
        try:
            body = await request.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {}

        try:
            payload = TrainPayload.model_validate(body)
        except ValidationError as e:
            return JSONResponse(format_field_errors(to_field_errors(e, "body")), status_code=422)

        train = await self.registration_service.register(payload.to_domain())
        return JSONResponse(format_train(train))

    async def list_trains(self, _request: Request) -> Response:
        """GET /trains - every stored train."""
        trains = await self.registration_service.list_trains()
        return JSONResponse([format_train(train) for train in trains])

    async def search_trains(self, request: Request) -> Response:
        """GET /trains/search - direct itineraries from source to destination."""
        params = dict(request.query_params)

        try:
            query = SearchQuery.model_validate(params)
        except ValidationError as e:
            return JSONResponse(format_field_errors(to_field_errors(e, "query")), status_code=422)

        try:
            results = await asyncio.wait_for(
                self.search_service.search(query.source, query.destination),
                timeout=self.config.request_timeout_seconds,
            )
        except TimeoutError as e:
            raise UpstreamFetchError(
                f"Search timed out after {self.config.request_timeout_seconds} seconds"
            ) from e

        return JSONResponse([format_itinerary(result) for result in results])

    async def healthz(self, _request: Request) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return Response(content="Ok", media_type="text/plain")

    def build_app(self) -> ASGIApp:
        """Assemble the Starlette application wrapped in rate limiting and access logging."""
        app = Starlette(
            routes=[
                Route("/trains/search", self.search_trains, methods=["GET"]),
                Route("/trains", self.create_train, methods=["POST"]),
                Route("/trains", self.list_trains, methods=["GET"]),
                Route("/healthz", self.healthz, methods=["GET"]),
            ],
            exception_handlers={
                HTTPException: _http_exception_handler,
                TrainSearchError: _server_error_handler,
                Exception: _server_error_handler,
            },
        )
        limited = RateLimitMiddleware(app, requests_per_minute=self.config.rate_limit_per_minute)
        return RequestLoggingMiddleware(limited, enabled=self.config.log_requests)

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        config = uvicorn.Config(
            self.build_app(),
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level,
        )
        self._server = uvicorn.Server(config)
        logger.info(f"Serving train search on {self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server is not None:
            self._server.should_exit = True
