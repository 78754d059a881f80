class WeatherServiceException(Exception):
    """Base exception for the city weather service."""
    def __init__(self, message: str):
        super().__init__(message)


class UpstreamUnavailableError(WeatherServiceException):
    """Raised when the upstream forecast API cannot deliver usable data."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
