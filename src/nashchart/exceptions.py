class NashChartError(Exception):
    """Base exception for nashchart."""


class FetchError(NashChartError):
    """Raised when an HTTP request for a chord sheet fails."""

    def __init__(self, location: str, status_code: int):
        self.location = location
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {location}")


class SourceError(NashChartError):
    """Raised when a local chord sheet cannot be read or decoded."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Cannot read {location}: {reason}")


class UnsupportedSourceError(NashChartError):
    """Raised when no source adapter matches the given location."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"No source found for: {location}")
