"""Standard library logging adapter."""

import logging
from typing import Any


class StdLoggerAdapter:
    """LoggerPort on top of the logging module.

    Keyword context is appended to the message as sorted key=value pairs.
    """

    def __init__(self, name: str = "s3templates", level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            )
            self.logger.addHandler(handler)

    @staticmethod
    def _format(message: str, kwargs: dict[str, Any]) -> str:
        if not kwargs:
            return message
        context = " ".join(f"{key}={value}" for key, value in sorted(kwargs.items()))
        return f"{message} {context}"

    def debug(self, message: str, **kwargs: Any) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format(message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(self._format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.logger.warning(self._format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self.logger.error(self._format(message, kwargs))

    def log_operation(
        self,
        op: str,
        key: str,
        durations: dict[str, float],
        cache_hit: bool = False,
        **kwargs: Any,
    ) -> None:
        timings = ",".join(f"{name}:{seconds:.3f}s" for name, seconds in durations.items())
        self.info(f"Operation {op}", key=key, durations=timings, cache_hit=cache_hit, **kwargs)
