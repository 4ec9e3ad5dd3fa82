"""Domain exceptions."""


class TrainSearchError(Exception):
    """Base error carrying a message and a machine-readable code."""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidDataError(TrainSearchError):
    """A stored train record violates the data model."""

    def __init__(self, message: str = "Stored train data is invalid") -> None:
        super().__init__(message, code="INVALID_DATA")


class UpstreamFetchError(TrainSearchError):
    """The schedule store could not deliver the trains."""

    def __init__(self, message: str = "Could not fetch trains from the schedule store") -> None:
        super().__init__(message, code="UPSTREAM_FETCH_FAILED")
