"""s3templates - Serve templates from an S3 bucket with an in-process cache."""

try:
    from ._version import version as __version__
except ImportError:
    # Package is not installed, so version is not available
    __version__ = "0.0.0+unknown"

from .client import create_resolver
from .core import (
    ConfigurationError,
    Deadline,
    DeadlineExceededError,
    NotFoundError,
    ObjectCache,
    ProviderError,
    TemplateContent,
    TemplateProviderConfig,
    TemplateResolver,
    TransportError,
)
from .loader import S3Loader

__all__ = [
    "ConfigurationError",
    "Deadline",
    "DeadlineExceededError",
    "NotFoundError",
    "ObjectCache",
    "ProviderError",
    "S3Loader",
    "TemplateContent",
    "TemplateProviderConfig",
    "TemplateResolver",
    "TransportError",
    "__version__",
    "create_resolver",
]
