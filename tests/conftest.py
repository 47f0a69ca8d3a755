"""Shared pytest fixtures for depwire tests."""

from __future__ import annotations

import pytest

from depwire import Container, LockMode, StaticTypeMetadataProvider
from tests.helpers import CountingMetadataProvider

pytest_plugins = ["depwire.integrations.pytest_plugin"]


@pytest.fixture()
def container() -> Container:
    """Default container backed by runtime reflection."""
    return Container()


@pytest.fixture()
def counting_metadata() -> CountingMetadataProvider:
    return CountingMetadataProvider()


@pytest.fixture()
def counting_container(counting_metadata: CountingMetadataProvider) -> Container:
    return Container(metadata_provider=counting_metadata)


@pytest.fixture()
def static_metadata() -> StaticTypeMetadataProvider:
    """Empty static metadata table; tests declare the identifiers they need."""
    return StaticTypeMetadataProvider()


@pytest.fixture()
def static_container(static_metadata: StaticTypeMetadataProvider) -> Container:
    """Container wired from ``static_metadata`` instead of reflection."""
    return Container(metadata_provider=static_metadata)


@pytest.fixture()
def unlocked_container() -> Container:
    return Container(lock_mode=LockMode.NONE)
