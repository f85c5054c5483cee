"""Error taxonomy for template resolution."""


class ProviderError(Exception):
    """Base class for all template provider errors."""


class ConfigurationError(ProviderError):
    """Bucket name or credentials are missing."""


class NotFoundError(ProviderError):
    """No stored object matches the template name."""


class TransportError(ProviderError):
    """A listing or fetch call against the store failed."""


class DeadlineExceededError(ProviderError):
    """The caller's deadline expired or was cancelled."""
