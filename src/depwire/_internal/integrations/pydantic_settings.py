from __future__ import annotations

import importlib
import warnings
from typing import Any

from depwire._internal.type_checks import is_runtime_class

_SETTINGS_MODULES = ("pydantic_settings", "pydantic.v1")


def _settings_bases(module_names: tuple[str, ...]) -> tuple[type[Any], ...]:
    bases: dict[int, type[Any]] = {}
    for module_name in module_names:
        # pydantic.v1 warns on import under Python 3.14+.
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                continue
        base = getattr(module, "BaseSettings", None)
        if is_runtime_class(base):
            bases.setdefault(id(base), base)
    return tuple(bases.values())


SETTINGS_BASES: tuple[type[Any], ...] = _settings_bases(_SETTINGS_MODULES)


def is_pydantic_settings_subclass(candidate: object) -> bool:
    """Return whether a class is an application settings model.

    Settings models read their fields from the environment, so the reflection
    provider describes them as parameterless and builds them with a
    zero-argument call instead of autowiring their fields. The ``BaseSettings``
    classes themselves are not settings models.

    Args:
        candidate: Object to test.

    """
    if not is_runtime_class(candidate) or candidate in SETTINGS_BASES:
        return False
    try:
        return issubclass(candidate, SETTINGS_BASES)
    except TypeError:
        return False


__all__ = ["SETTINGS_BASES", "is_pydantic_settings_subclass"]
