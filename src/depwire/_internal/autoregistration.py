from __future__ import annotations

import datetime
import decimal
import enum
import inspect
import pathlib
import uuid
from dataclasses import dataclass
from typing import Any, TypeGuard

from depwire._internal.type_checks import is_protocol_class, is_runtime_class

_VALUE_MODULES = frozenset({"builtins", "typing"})


@dataclass(frozen=True, slots=True)
class DependencyAnnotationPolicy:
    """Internal policy deciding which parameter annotations name dependencies."""

    ignored_base_types: tuple[type[Any], ...] = (
        pathlib.PurePath,
        datetime.datetime,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        uuid.UUID,
        decimal.Decimal,
        enum.Enum,
    )

    def is_dependency_class(self, candidate: object) -> TypeGuard[type[Any]]:
        """Return true when an annotation names a class the container should wire.

        Builtins, typing special forms and value-like types (paths, dates,
        UUIDs, decimals, enums) are plain values, never dependencies.
        Abstract classes and protocols still are: they fail later with a
        clear error unless overridden.

        Args:
            candidate: Parameter annotation with ``Annotated`` and ``Optional``
                wrappers already removed.

        """
        if not is_runtime_class(candidate):
            return False
        if candidate.__module__ in _VALUE_MODULES:
            return False
        if issubclass(candidate, type):
            return False
        return not issubclass(candidate, self.ignored_base_types)

    def is_instantiable(self, candidate: type[Any]) -> bool:
        return not inspect.isabstract(candidate) and not is_protocol_class(candidate)


__all__ = ["DependencyAnnotationPolicy"]
