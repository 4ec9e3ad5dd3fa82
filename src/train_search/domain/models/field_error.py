"""Field error domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class FieldError(BaseModel):
    """A single field-level validation failure reported to API clients."""

    model_config = ConfigDict(frozen=True)

    msg: str
    param: str
    location: str
    value: Any = None
