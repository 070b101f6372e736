from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel

TEMPERATURE_HIGH = 35.0  # degC
PRECIPITATION_HIGH = 50.0  # mm/day
WIND_SPEED_HIGH = 25.0  # km/h


class AlertType(str, Enum):
    temperature = "temperature"
    precipitation = "precipitation"
    wind = "wind"


class Severity(str, Enum):
    warning = "warning"
    danger = "danger"


class WeatherAlert(BaseModel):
    type: AlertType
    severity: Severity
    message: str
    value: float
    threshold: float
    time: Optional[str] = None


def detect_temperature_alert(temperature: float) -> Optional[WeatherAlert]:
    if temperature > TEMPERATURE_HIGH:
        return WeatherAlert(
            type=AlertType.temperature,
            severity=Severity.danger,
            message=f"Extreme temperature: {temperature:.1f}°C",
            value=temperature,
            threshold=TEMPERATURE_HIGH,
        )
    return None


def detect_precipitation_alert(precipitation: float) -> Optional[WeatherAlert]:
    if precipitation > PRECIPITATION_HIGH:
        return WeatherAlert(
            type=AlertType.precipitation,
            severity=Severity.danger,
            message=f"Heavy precipitation: {precipitation:.1f}mm/day",
            value=precipitation,
            threshold=PRECIPITATION_HIGH,
        )
    return None


def detect_wind_alert(wind_speed: float) -> Optional[WeatherAlert]:
    if wind_speed > WIND_SPEED_HIGH:
        return WeatherAlert(
            type=AlertType.wind,
            severity=Severity.warning,
            message=f"Strong winds: {wind_speed:.1f}km/h",
            value=wind_speed,
            threshold=WIND_SPEED_HIGH,
        )
    return None


def _at(values: Any, i: int) -> Optional[float]:
    if not isinstance(values, list) or i >= len(values):
        return None
    v = values[i]
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    return float(v)


_DAILY_CHECKS = (
    ("temperature_2m_max", detect_temperature_alert),
    ("precipitation_sum", detect_precipitation_alert),
    ("windspeed_10m_max", detect_wind_alert),
)


def detect_all_alerts(payload: Mapping[str, Any]) -> List[WeatherAlert]:
    """Scan a daily payload; days without a value for a variable are skipped."""
    daily = payload.get("daily") or {}
    alerts: List[WeatherAlert] = []
    for i, t in enumerate(daily.get("time") or []):
        for key, detect in _DAILY_CHECKS:
            v = _at(daily.get(key), i)
            if v is None:
                continue
            alert = detect(v)
            if alert is not None:
                alerts.append(alert.model_copy(update={"time": t}))
    return alerts


def rainy_days_this_month(payload: Mapping[str, Any], today: Optional[date] = None) -> int:
    month = (today or datetime.now(timezone.utc).date()).isoformat()[:7]
    daily = payload.get("daily") or {}
    precip = daily.get("precipitation_sum")
    n = 0
    for i, t in enumerate(daily.get("time") or []):
        if str(t).startswith(month) and (_at(precip, i) or 0.0) > 0:
            n += 1
    return n


def to_series(payload: Mapping[str, Any], key: str) -> List[Dict[str, Any]]:
    """Hourly payload -> ``[{"time": t, key: value}]`` with missing values as 0."""
    hourly = payload.get("hourly") or {}
    values = hourly.get(key)
    return [{"time": t, key: _at(values, i) or 0} for i, t in enumerate(hourly.get("time") or [])]
