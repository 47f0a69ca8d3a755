from depwire.integrations.pytest_plugin.plugin import (
    depwire_container,
    depwire_overrides,
    pytest_configure,
)

__all__ = ["depwire_container", "depwire_overrides", "pytest_configure"]
