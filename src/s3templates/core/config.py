"""Centralized configuration for s3templates."""

import os
from dataclasses import dataclass, field


def _split_search_path(value: str) -> tuple[str, ...]:
    return tuple(entry for entry in value.split(":") if entry.strip())


@dataclass(slots=True)
class TemplateProviderConfig:
    """All provider configuration in one place.

    Environment variables (all optional):
        AWS_ACCESS_KEY_ID:      Access key. Falls back to boto3's credential chain.
        AWS_ACCESS_KEY_SECRET:  Secret key (AWS_SECRET_ACCESS_KEY is also read).
        AWS_TEMPLATE_BUCKET:    Bucket holding the templates.
        S3T_SEARCH_PATH:        Colon-separated directories tried after the bare name.
        S3T_REFRESH_INTERVAL:   Seconds after a full listing during which misses
                                do not list again. Default 0 (always list on miss).
        S3T_LOG_LEVEL:          Logging level. Default "INFO".
    """

    bucket_name: str | None = None
    search_path: tuple[str, ...] = ()
    refresh_interval: float = 0.0
    log_level: str = "INFO"

    access_key: str | None = field(default=None, repr=False)
    secret_key: str | None = field(default=None, repr=False)

    # Connection params (typically passed by CLI, not env vars)
    endpoint_url: str | None = field(default=None, repr=False)
    region: str | None = None
    profile: str | None = None

    @classmethod
    def from_env(
        cls,
        *,
        bucket_name: str | None = None,
        search_path: tuple[str, ...] | list[str] | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        log_level: str = "INFO",
        endpoint_url: str | None = None,
        region: str | None = None,
        profile: str | None = None,
    ) -> "TemplateProviderConfig":
        """Build config from environment variables + explicit overrides."""
        if search_path is None:
            search_path = _split_search_path(os.environ.get("S3T_SEARCH_PATH", ""))
        return cls(
            bucket_name=bucket_name or os.environ.get("AWS_TEMPLATE_BUCKET") or None,
            search_path=tuple(search_path),
            refresh_interval=float(os.environ.get("S3T_REFRESH_INTERVAL", "0")),
            log_level=os.environ.get("S3T_LOG_LEVEL", log_level),
            access_key=access_key or os.environ.get("AWS_ACCESS_KEY_ID"),
            secret_key=secret_key
            or os.environ.get("AWS_ACCESS_KEY_SECRET")
            or os.environ.get("AWS_SECRET_ACCESS_KEY"),
            endpoint_url=endpoint_url,
            region=region,
            profile=profile,
        )
