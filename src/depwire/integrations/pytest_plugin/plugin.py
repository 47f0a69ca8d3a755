from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from depwire._internal.container import Container

_OVERRIDES_MARKER = "depwire_overrides"


def pytest_configure(config: pytest.Config) -> None:
    """Register the ``depwire_overrides`` marker.

    Args:
        config: Pytest configuration object.

    """
    config.addinivalue_line(
        "markers",
        f"{_OVERRIDES_MARKER}(mapping=None, **overrides): identifier overrides applied to "
        "the depwire_container fixture.",
    )


@pytest.fixture()
def depwire_overrides(request: pytest.FixtureRequest) -> dict[Any, Any]:
    """Collect identifier overrides for the per-test container.

    Overrides come from ``@pytest.mark.depwire_overrides`` markers on the test,
    its class and its module; the marker closest to the test wins. Override
    this fixture to supply overrides programmatically.

    Returns:
        Mapping passed as ``overrides`` to ``depwire_container``.

    """
    overrides: dict[Any, Any] = {}
    for marker in reversed(list(request.node.iter_markers(_OVERRIDES_MARKER))):
        for mapping in marker.args:
            overrides.update(_as_mapping(mapping))
        overrides.update(marker.kwargs)
    return overrides


@pytest.fixture()
def depwire_container(depwire_overrides: dict[Any, Any]) -> Container:
    """Create a per-test container configured with ``depwire_overrides``.

    The fixture is function-scoped, so cached factories and manual
    registrations never leak between tests.

    Returns:
        A new ``Container`` instance.

    """
    return Container(depwire_overrides)


def _as_mapping(value: object) -> Mapping[Any, Any]:
    if not isinstance(value, Mapping):
        msg = f"@pytest.mark.{_OVERRIDES_MARKER} expects a mapping, got {type(value).__name__}."
        raise TypeError(msg)
    return value


__all__ = ["depwire_container", "depwire_overrides", "pytest_configure"]
