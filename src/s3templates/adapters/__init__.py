"""Adapters implementing the s3templates ports."""

from .clock_utc import UtcClockAdapter
from .logger_std import StdLoggerAdapter
from .storage_s3 import S3StorageAdapter

__all__ = [
    "S3StorageAdapter",
    "StdLoggerAdapter",
    "UtcClockAdapter",
]
