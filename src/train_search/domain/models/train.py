"""Train domain model."""

from dataclasses import dataclass, field

from train_search.domain.models.stop import Stop


@dataclass(frozen=True)
class Train:
    """A named train and its stops in physical route order."""

    name: str
    stops: tuple[Stop, ...] = field(default_factory=tuple)
