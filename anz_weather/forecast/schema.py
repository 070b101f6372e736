"""Open-Meteo response shapes.

Only ``time`` is typed; every other field (per-variable arrays, units,
top-level metadata) is accepted as-is so new upstream fields never break
validation.
"""

from typing import Any, Dict, List, Type

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from anz_weather.common.granularity import Granularity


class TimeSeriesBlock(BaseModel):
    model_config = ConfigDict(extra="allow")

    time: List[StrictStr]


class HourlyResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    hourly: TimeSeriesBlock


class DailyResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    daily: TimeSeriesBlock


RESPONSE_MODELS: Dict[Granularity, Type[BaseModel]] = {
    Granularity.hourly: HourlyResponse,
    Granularity.daily: DailyResponse,
}


class SchemaError(ValueError):
    def __init__(self, issues: List[Dict[str, Any]]):
        self.issues = issues
        summary = "; ".join(f"{'.'.join(str(p) for p in i['path'])}: {i['message']}" for i in issues)
        super().__init__(f"Response does not match schema: {summary}")


def _issues(exc: ValidationError) -> List[Dict[str, Any]]:
    return [
        {"path": list(err["loc"]), "message": err["msg"], "code": err["type"]}
        for err in exc.errors(include_url=False)
    ]


def validate_payload(granularity: Granularity, raw: Any) -> Dict[str, Any]:
    """Validate ``raw`` against the granularity's shape and return it unchanged."""
    model = RESPONSE_MODELS[Granularity(granularity)]
    try:
        model.model_validate(raw)
    except ValidationError as e:
        raise SchemaError(_issues(e)) from e
    return raw
