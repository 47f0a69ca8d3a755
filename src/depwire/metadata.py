from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class _MissingType:
    """Sentinel type for parameters without a declared default."""

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _MissingType()


class ConstructorVisibility(Enum):
    """Report whether the container may call a type's constructor."""

    PUBLIC = "public"
    NON_PUBLIC = "non_public"


class ParameterKind(Enum):
    """Report how an argument is passed to the constructor."""

    POSITIONAL = "positional"
    KEYWORD = "keyword"


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """Describe one constructor parameter.

    Attributes:
        name: Parameter name, used in diagnostics and for keyword arguments.
        depends_on: Identifier of the type this parameter depends on, or
            ``None`` when the parameter does not name a dependency.
        default: Literal default value, or ``MISSING`` when none is declared.
        kind: Whether the argument is passed positionally or by keyword.

    """

    name: str
    depends_on: str | None = None
    default: Any = MISSING
    kind: ParameterKind = ParameterKind.POSITIONAL

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Describe what the container needs to know about a type.

    Attributes:
        identifier: Identifier of the described type.
        is_instantiable: ``False`` for abstract and interface-like types.
        has_constructor: Whether the type declares its own constructor.
        visibility: Visibility of the declared constructor.
        parameters: Constructor parameters in declared order.

    """

    identifier: str
    is_instantiable: bool = True
    has_constructor: bool = True
    visibility: ConstructorVisibility = ConstructorVisibility.PUBLIC
    parameters: tuple[ParameterDescriptor, ...] = field(default_factory=tuple)


@runtime_checkable
class TypeMetadataProvider(Protocol):
    """Expose type metadata for identifiers.

    Implementations raise ``DepWireTypeNotFoundError`` for identifiers they do
    not know about.
    """

    def describe(self, identifier: str) -> TypeDescriptor: ...


@runtime_checkable
class InstanceBuilder(Protocol):
    """Build an instance of a type from ordered constructor arguments."""

    def build(self, identifier: str, args: Sequence[Any]) -> Any: ...


@runtime_checkable
class TypeRecorder(Protocol):
    """Remember class objects so identifiers for them resolve without an import.

    The container hands every class it receives through its public API to a
    metadata provider implementing this protocol. Classes that cannot be
    re-imported from ``module.qualname``, such as classes defined inside a
    function, resolve only this way.
    """

    def record(self, cls: type[Any]) -> str: ...


__all__ = [
    "MISSING",
    "ConstructorVisibility",
    "InstanceBuilder",
    "ParameterDescriptor",
    "ParameterKind",
    "TypeDescriptor",
    "TypeMetadataProvider",
    "TypeRecorder",
]
