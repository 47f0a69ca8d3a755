from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from depwire.exceptions import DepWireTypeNotFoundError
from depwire.metadata import ConstructorVisibility, ParameterDescriptor, ParameterKind, TypeDescriptor


@dataclass(slots=True)
class StaticTypeMetadataProvider:
    """Serve declared type metadata and builders without runtime inspection.

    Declare every identifier the container may autowire up front, together
    with the callable that builds it. Identifiers do not have to be import
    paths, which makes this provider useful for generated wiring tables and
    for plugging in types that reflection cannot describe.

    Examples:
        .. code-block:: python

            metadata = StaticTypeMetadataProvider()
            metadata.declare("Clock", SystemClock)
            metadata.declare(
                "Scheduler",
                Scheduler,
                parameters=[ParameterDescriptor("clock", depends_on="Clock")],
            )
            container = Container(metadata_provider=metadata)

    """

    _descriptors: dict[str, TypeDescriptor] = field(default_factory=dict)
    _builders: dict[str, Callable[..., Any]] = field(default_factory=dict)

    def declare(
        self,
        identifier: str,
        builder: Callable[..., Any] | None = None,
        *,
        parameters: Iterable[ParameterDescriptor] = (),
        is_instantiable: bool = True,
        has_constructor: bool = True,
        visibility: ConstructorVisibility = ConstructorVisibility.PUBLIC,
    ) -> TypeDescriptor:
        """Declare metadata for an identifier, replacing any earlier declaration.

        Args:
            identifier: Identifier being described.
            builder: Callable receiving the constructor arguments. Required for
                instantiable types.
            parameters: Constructor parameters in declared order.
            is_instantiable: ``False`` for interface-like identifiers.
            has_constructor: Whether the type declares a constructor.
            visibility: Visibility of the declared constructor.

        Raises:
            ValueError: If an instantiable type is declared without a builder.

        """
        if is_instantiable and builder is None:
            msg = f"An instantiable type '{identifier}' needs a builder."
            raise ValueError(msg)

        descriptor = TypeDescriptor(
            identifier=identifier,
            is_instantiable=is_instantiable,
            has_constructor=has_constructor,
            visibility=visibility,
            parameters=tuple(parameters),
        )
        self._descriptors[identifier] = descriptor
        if builder is not None:
            self._builders[identifier] = builder
        else:
            self._builders.pop(identifier, None)
        return descriptor

    def describe(self, identifier: str) -> TypeDescriptor:
        try:
            return self._descriptors[identifier]
        except KeyError:
            raise DepWireTypeNotFoundError(identifier, "no metadata was declared") from None

    def build(self, identifier: str, args: Sequence[Any]) -> Any:
        descriptor = self.describe(identifier)
        builder = self._builders.get(identifier)
        if builder is None:
            raise DepWireTypeNotFoundError(identifier, "no builder was declared")

        positional: list[Any] = []
        keywords: dict[str, Any] = {}
        for parameter, value in zip(descriptor.parameters, args):
            if parameter.kind is ParameterKind.KEYWORD:
                keywords[parameter.name] = value
            else:
                positional.append(value)
        return builder(*positional, **keywords)


__all__ = ["StaticTypeMetadataProvider"]
