"""Tests for the HTTP API."""

import asyncio
import logging

import pytest
from starlette.testclient import TestClient

from tests.builders import make_train
from train_search.adapters.config import AppConfig
from train_search.adapters.storage import InMemoryTrainRepository
from train_search.adapters.web import StarletteWebAdapter
from train_search.application.services import RouteSearchService, TrainRegistrationService
from train_search.domain.models import ItineraryResult, Train

EXPRESS_BODY = {
    "name": "Express1",
    "stops": [
        {"station": "A", "distanceFromPrevious": 0, "departureTime": "08:00"},
        {"station": "B", "distanceFromPrevious": 100, "departureTime": "09:00"},
        {"station": "C", "distanceFromPrevious": 50, "departureTime": "10:00"},
    ],
}


def _build_client(trains: list[Train] | None = None, **config_overrides: object) -> TestClient:
    config = AppConfig(**{"rate_limit_per_minute": 0, **config_overrides})
    repo = InMemoryTrainRepository(trains)
    adapter = StarletteWebAdapter(
        RouteSearchService(repo), TrainRegistrationService(repo), config
    )
    return TestClient(adapter.build_app())


@pytest.fixture
def client() -> TestClient:
    """Client for an API with an empty schedule store."""
    return _build_client()


def test_create_train_returns_stored_train(client: TestClient) -> None:
    """Given a valid train body, when posting it, then the stored train is returned."""
    response = client.post("/trains", json=EXPRESS_BODY)

    assert response.status_code == 200
    assert response.json() == EXPRESS_BODY


def test_create_then_search_returns_priced_itinerary(client: TestClient) -> None:
    """Given Express1 was created, when searching A to C, then one priced result is returned."""
    client.post("/trains", json=EXPRESS_BODY)

    response = client.get("/trains/search", params={"source": "A", "destination": "C"})

    assert response.status_code == 200
    assert response.json() == [
        {
            "train": "Express1",
            "starting": "08:00",
            "reaching": "10:00",
            "distance": 150,
            "price": "187.50",
        }
    ]


def test_search_reverse_direction_returns_empty_list(client: TestClient) -> None:
    """Given Express1, when searching C to A, then an empty list is returned."""
    client.post("/trains", json=EXPRESS_BODY)

    response = client.get("/trains/search", params={"source": "C", "destination": "A"})

    assert response.status_code == 200
    assert response.json() == []


def test_create_train_accepts_numeric_strings(client: TestClient) -> None:
    """Given a distance sent as a numeric string, when posting, then it is stored as a number."""
    body = {
        "name": "Local",
        "stops": [
            {"station": "A", "distanceFromPrevious": "0", "departureTime": "8:00"},
            {"station": "B", "distanceFromPrevious": "10", "departureTime": "8:30"},
        ],
    }

    response = client.post("/trains", json=body)

    assert response.status_code == 200
    assert response.json()["stops"][1]["distanceFromPrevious"] == 10
    search = client.get("/trains/search", params={"source": "A", "destination": "B"})
    assert search.json()[0]["price"] == "12.50"


def test_whole_float_distances_read_back_as_integers(client: TestClient) -> None:
    """Given distances sent as 0.0 and 100.0, when searching, then distance reads back as 100."""
    body = {
        "name": "Express1",
        "stops": [
            {"station": "A", "distanceFromPrevious": 0.0, "departureTime": "08:00"},
            {"station": "B", "distanceFromPrevious": 100.0, "departureTime": "09:00"},
        ],
    }

    created = client.post("/trains", json=body)
    search = client.get("/trains/search", params={"source": "A", "destination": "B"})

    assert type(created.json()["stops"][1]["distanceFromPrevious"]) is int
    assert type(search.json()[0]["distance"]) is int
    assert search.json()[0]["distance"] == 100
    assert search.json()[0]["price"] == "125.00"


def test_create_train_reports_field_errors(client: TestClient) -> None:
    """Given an invalid body, when posting, then 422 lists one error per bad field."""
    body = {
        "name": "",
        "stops": [{"station": "A", "distanceFromPrevious": "far", "departureTime": "8 am"}],
    }

    response = client.post("/trains", json=body)

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert [(e["param"], e["msg"]) for e in errors] == [
        ("name", "Train name is required"),
        ("stops[0].distanceFromPrevious", "Distance from previous station must be a number"),
        ("stops[0].departureTime", "Departure time must be in HH:mm format"),
    ]
    assert all(e["location"] == "body" for e in errors)


def test_create_train_with_invalid_json_reports_missing_name(client: TestClient) -> None:
    """Given a body that is not JSON, when posting, then 422 reports the missing name."""
    response = client.post(
        "/trains", content=b"not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["msg"] == "Train name is required"


def test_create_train_does_not_store_invalid_train(client: TestClient) -> None:
    """Given a rejected body, when listing trains, then nothing was stored."""
    client.post("/trains", json={"name": "Bad", "stops": [{"station": ""}]})

    assert client.get("/trains").json() == []


def test_list_trains_returns_all_in_order() -> None:
    """Given seeded trains, when listing, then all are returned in store order."""
    client = _build_client(
        [make_train("First", ("A", 0, "06:00")), make_train("Second", ("B", 0, "07:00"))]
    )

    response = client.get("/trains")

    assert response.status_code == 200
    assert [t["name"] for t in response.json()] == ["First", "Second"]
    assert response.json()[0]["stops"] == [
        {"station": "A", "distanceFromPrevious": 0, "departureTime": "06:00"}
    ]


@pytest.mark.parametrize(
    ("params", "expected_params"),
    [
        ({}, ["source", "destination"]),
        ({"source": "A"}, ["destination"]),
        ({"source": "", "destination": "B"}, ["source"]),
    ],
)
def test_search_requires_source_and_destination(
    client: TestClient, params: dict[str, str], expected_params: list[str]
) -> None:
    """Given missing or empty query params, when searching, then 422 names each one."""
    response = client.get("/trains/search", params=params)

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert [e["param"] for e in errors] == expected_params
    assert all(e["location"] == "query" for e in errors)


def test_search_with_corrupt_data_returns_generic_500() -> None:
    """Given a stored train with a corrupt distance, when searching it, then a generic 500."""
    broken = make_train("Broken", ("A", 0, "08:00"), ("B", "far", "09:00"))  # type: ignore[arg-type]
    client = _build_client([broken])

    response = client.get("/trains/search", params={"source": "A", "destination": "B"})

    assert response.status_code == 500
    assert response.json() == {"error": {"message": "Internal Server Error"}}
    assert "Broken" not in response.text


class SlowSearchService:
    """Search service that never answers in time."""

    async def search(self, source: str, destination: str) -> list[ItineraryResult]:
        await asyncio.sleep(1)
        return []


def test_search_timeout_returns_generic_500() -> None:
    """Given a search slower than the request timeout, when searching, then a generic 500."""
    config = AppConfig(rate_limit_per_minute=0, request_timeout_seconds=0.01)
    repo = InMemoryTrainRepository()
    adapter = StarletteWebAdapter(SlowSearchService(), TrainRegistrationService(repo), config)
    client = TestClient(adapter.build_app())

    response = client.get("/trains/search", params={"source": "A", "destination": "B"})

    assert response.status_code == 500
    assert response.json() == {"error": {"message": "Internal Server Error"}}


def test_unknown_path_returns_json_404(client: TestClient) -> None:
    """Given an unknown path, when requesting it, then a JSON 404 is returned."""
    response = client.get("/stations")

    assert response.status_code == 404
    assert response.json() == {"error": {"message": "Not Found"}}


def test_healthz(client: TestClient) -> None:
    """Given a running API, when checking health, then returns Ok."""
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.text == "Ok"


def test_adapter_rejects_wrong_config_type() -> None:
    """Given a config that is not AppConfig, when creating the adapter, then TypeError."""
    repo = InMemoryTrainRepository()

    with pytest.raises(TypeError, match="AppConfig"):
        StarletteWebAdapter(
            RouteSearchService(repo), TrainRegistrationService(repo), {"port": 1}  # type: ignore[arg-type]
        )


def test_adapter_rejects_service_without_search() -> None:
    """Given an object without search(), when creating the adapter, then TypeError."""
    repo = InMemoryTrainRepository()

    with pytest.raises(TypeError, match="RouteSearchService"):
        StarletteWebAdapter(
            object(), TrainRegistrationService(repo), AppConfig()  # type: ignore[arg-type]
        )


def test_rate_limit_applies_to_api() -> None:
    """Given a limit of one request per minute, when calling twice, then the second gets 429."""
    client = _build_client(rate_limit_per_minute=1)

    first = client.get("/healthz")
    second = client.get("/healthz")

    assert first.status_code == 200
    assert second.status_code == 429
    assert second.json() == {"error": {"message": "Rate limit exceeded. Please try again later."}}


def test_request_logging_writes_one_line_per_request(caplog: pytest.LogCaptureFixture) -> None:
    """Given request logging enabled, when searching, then one access line is logged."""
    client = _build_client(log_requests=True)
    logger_name = "train_search.adapters.web.request_logging_middleware"

    with caplog.at_level(logging.INFO, logger=logger_name):
        client.get("/trains/search", params={"source": "A", "destination": "C"})

    lines = [
        record.getMessage()
        for record in caplog.records
        if record.name == logger_name
    ]
    assert len(lines) == 1
    assert lines[0].startswith("GET /trains/search?source=A&destination=C -> 200 (")
