"""Port interfaces for s3templates."""

from .cache import CachePort, ObjectSource
from .clock import ClockPort
from .logger import LoggerPort
from .storage import ObjectHead, StoragePort

__all__ = [
    "CachePort",
    "ClockPort",
    "LoggerPort",
    "ObjectHead",
    "ObjectSource",
    "StoragePort",
]
