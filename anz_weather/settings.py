import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Settings:
    open_meteo_base_url: str
    upstream_timeout_seconds: float
    retry_max_attempts: int
    retry_base_delay_seconds: float
    cache_max_age_seconds: int
    default_timezone: str

    max_date_range_days: int
    default_range_days: int

    cors_origins: List[str]
    cors_origin_regex: Optional[str]
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        open_meteo_base_url = os.getenv(
            "OPEN_METEO_BASE_URL", "https://api.open-meteo.com/v1/forecast"
        ).strip()
        upstream_timeout_seconds = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))
        retry_max_attempts = int(os.getenv("RETRY_MAX_ATTEMPTS", "3"))
        retry_base_delay_seconds = float(os.getenv("RETRY_BASE_DELAY_SECONDS", "1.0"))
        cache_max_age_seconds = int(os.getenv("CACHE_MAX_AGE_SECONDS", "300"))
        default_timezone = os.getenv("DEFAULT_TIMEZONE", "auto").strip() or "auto"

        max_date_range_days = int(os.getenv("MAX_DATE_RANGE_DAYS", "30"))
        default_range_days = int(os.getenv("DEFAULT_RANGE_DAYS", "7"))

        cors_origins = [
            o.strip()
            for o in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://127.0.0.1:3000,http://localhost:8000,http://127.0.0.1:8000",
            ).split(",")
            if o.strip()
        ]

        # Dev servers pick random ports; match any localhost origin unless overridden.
        cors_origin_regex = os.getenv("CORS_ORIGIN_REGEX", "").strip() or r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$"

        log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()

        return cls(
            open_meteo_base_url=open_meteo_base_url,
            upstream_timeout_seconds=upstream_timeout_seconds,
            retry_max_attempts=max(1, retry_max_attempts),
            retry_base_delay_seconds=max(0.0, retry_base_delay_seconds),
            cache_max_age_seconds=cache_max_age_seconds,
            default_timezone=default_timezone,
            max_date_range_days=max_date_range_days,
            default_range_days=default_range_days,
            cors_origins=cors_origins,
            cors_origin_regex=cors_origin_regex,
            log_level=log_level,
        )


S = Settings.from_env()
