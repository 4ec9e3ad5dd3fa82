"""Server adapter port."""

from abc import ABC, abstractmethod


class ServerAdapter(ABC):
    """Port for exposing the services to clients."""

    @abstractmethod
    async def start(self) -> None:
        """Start serving; returns when the server shuts down."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Ask a running server to shut down."""
        ...
