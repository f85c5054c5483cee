"""Wiring for a ready-to-use TemplateResolver."""

from collections.abc import Iterable

from .adapters import S3StorageAdapter, StdLoggerAdapter, UtcClockAdapter
from .core import BucketSource, ObjectCache, TemplateProviderConfig, TemplateResolver


def create_resolver(
    config: TemplateProviderConfig | None = None,
    *,
    bucket_name: str | None = None,
    search_path: Iterable[str] | None = None,
    cache: ObjectCache | None = None,
) -> TemplateResolver:
    """Create a resolver with wired adapters.

    Without an explicit config, settings are read from the environment. The
    S3 client is only created when the bucket is first listed or read.
    Pass ``cache`` to share one cache between several resolvers.
    """
    if config is None:
        config = TemplateProviderConfig.from_env(
            bucket_name=bucket_name,
            search_path=tuple(search_path) if search_path is not None else None,
        )

    logger = StdLoggerAdapter(level=config.log_level)

    def storage_factory() -> S3StorageAdapter:
        return S3StorageAdapter(
            endpoint_url=config.endpoint_url,
            region=config.region,
            profile=config.profile,
            access_key=config.access_key,
            secret_key=config.secret_key,
        )

    source = BucketSource(config.bucket_name, storage_factory, logger)
    return TemplateResolver(
        source=source,
        clock=UtcClockAdapter(),
        logger=logger,
        cache=cache,
        search_path=config.search_path,
        refresh_interval=config.refresh_interval,
    )
