"""Shared fixtures for s3templates tests."""

from unittest.mock import Mock

import pytest
from helpers import FakeClock, FakeStorage

from s3templates.core import BucketSource, ObjectCache, TemplateResolver


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def logger():
    return Mock()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def storage_factory(storage):
    return Mock(return_value=storage)


@pytest.fixture
def make_resolver(storage_factory, clock, logger):
    """Build a resolver over the fake storage."""

    def _make(search_path=(), bucket_name="templates", cache=None, refresh_interval=0.0):
        source = BucketSource(bucket_name, storage_factory, logger)
        return TemplateResolver(
            source=source,
            clock=clock,
            logger=logger,
            cache=cache if cache is not None else ObjectCache(),
            search_path=search_path,
            refresh_interval=refresh_interval,
        )

    return _make
