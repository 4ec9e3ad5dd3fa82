"""Shared fixtures for train search tests."""

import pytest

from tests.builders import make_train
from train_search.domain.models import Train


@pytest.fixture
def express_train() -> Train:
    """Train "Express1" running A -> B -> C."""
    return make_train(
        "Express1",
        ("A", 0, "08:00"),
        ("B", 100, "09:00"),
        ("C", 50, "10:00"),
    )
