"""Jinja2 loader serving templates from the bucket."""

from collections.abc import Callable

from jinja2 import BaseLoader, Environment, TemplateNotFound

from .core import Deadline, NotFoundError, TemplateResolver


class S3Loader(BaseLoader):
    """Load Jinja2 templates through a TemplateResolver.

    Sources are reported as ``s3://bucket/key``. A loaded template stays up
    to date while the cache still holds the same object, or a refreshed
    object with the same key and stored last-modified time. Checking this
    does not touch the network once the object is cached.
    """

    def __init__(
        self,
        resolver: TemplateResolver,
        encoding: str = "utf-8",
        timeout: float | None = None,
    ):
        self.resolver = resolver
        self.encoding = encoding
        self.timeout = timeout

    def _deadline(self) -> Deadline | None:
        return Deadline(self.timeout) if self.timeout is not None else None

    def get_source(
        self, environment: Environment, template: str
    ) -> tuple[str, str | None, Callable[[], bool] | None]:
        try:
            content = self.resolver.content(template, self._deadline())
        except NotFoundError as e:
            raise TemplateNotFound(template, str(e)) from e

        loaded = self.resolver.resolve(template)
        stored_at = loaded.last_modified() if loaded is not None else None

        def uptodate() -> bool:
            current = self.resolver.resolve(template)
            if current is loaded:
                return True
            # A refresh replaced the handle; unchanged if key and stored time match
            return (
                current is not None
                and stored_at is not None
                and current.key == content.key
                and current.last_modified() == stored_at
            )

        filename = f"s3://{self.resolver.source.bucket_name}/{content.key}"
        return content.text(self.encoding), filename, uptodate

    def list_templates(self) -> list[str]:
        self.resolver.refresh(self._deadline())
        return sorted(self.resolver.cache.keys())
