"""Core template resolution logic."""

from .bucket import BucketObject, BucketSource
from .cache import ObjectCache
from .config import TemplateProviderConfig
from .deadline import Deadline
from .errors import (
    ConfigurationError,
    DeadlineExceededError,
    NotFoundError,
    ProviderError,
    TransportError,
)
from .models import ObjectHandle, RefreshResult, TemplateContent
from .paths import expand, normalize_name, normalize_prefix
from .resolver import TemplateResolver

__all__ = [
    "BucketObject",
    "BucketSource",
    "ConfigurationError",
    "Deadline",
    "DeadlineExceededError",
    "NotFoundError",
    "ObjectCache",
    "ObjectHandle",
    "ProviderError",
    "RefreshResult",
    "TemplateContent",
    "TemplateProviderConfig",
    "TemplateResolver",
    "TransportError",
    "expand",
    "normalize_name",
    "normalize_prefix",
]
