from typing import Any, Dict, Optional


class WeatherApiError(Exception):
    """Base error rendered as ``{"error": ..., **extra}`` with ``status_code``."""

    status_code: int = 500
    error: str = "Internal server error"

    def __init__(self, error: Optional[str] = None, **extra: Any) -> None:
        if error is not None:
            self.error = error
        self.extra: Dict[str, Any] = extra
        super().__init__(self.error)

    def body(self) -> Dict[str, Any]:
        return {"error": self.error, **self.extra}


class MissingParameter(WeatherApiError):
    status_code = 400
    error = "Missing required parameters: lat and lon"


class InvalidCoordinate(WeatherApiError):
    status_code = 400
    error = "Invalid coordinates: lat and lon must be numbers"


class OutOfRegion(WeatherApiError):
    status_code = 400
    error = "Coordinates must be within Australia or New Zealand bounds"


class InvalidParameter(WeatherApiError):
    status_code = 400
    error = "Invalid parameter"


class UpstreamUnavailable(WeatherApiError):
    # Gateway-class: the request was fine, the forecast provider was not.
    status_code = 502
    error = "Failed to fetch weather data"


class SchemaMismatch(WeatherApiError):
    status_code = 500
    error = "Invalid schema"
