from __future__ import annotations

import inspect
import logging
import types
from collections.abc import Sequence
from dataclasses import dataclass, field
from inspect import Parameter
from typing import Any, Union, get_args, get_origin, get_type_hints

from depwire._internal.autoregistration import DependencyAnnotationPolicy
from depwire._internal.identifiers import identifier_for, import_type
from depwire._internal.integrations.pydantic_settings import is_pydantic_settings_subclass
from depwire.exceptions import DepWireNotInstantiableError
from depwire.markers import extract_depends_on, is_non_public_constructor, strip_annotated
from depwire.metadata import (
    MISSING,
    ConstructorVisibility,
    ParameterDescriptor,
    ParameterKind,
    TypeDescriptor,
)

logger = logging.getLogger(__name__)

_MISSING_ANNOTATION = object()
_VARIADIC_KINDS = (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)


@dataclass(slots=True)
class ReflectionTypeMetadataProvider:
    """Describe and build classes found by their dotted import path.

    This is the container's default collaborator for both roles: it
    implements ``TypeMetadataProvider`` with ``importlib`` and ``inspect`` and
    ``InstanceBuilder`` by calling the class.

    Classes passed to ``record``, and classes found in constructor
    annotations, are remembered and never re-imported. Classes defined inside
    a function resolve this way.

    A parameter depends on another type when it is annotated with
    ``Annotated[..., DependsOn("...")]`` or with a class that is neither a
    builtin nor a value-like type. ``X | None`` annotations are unwrapped to
    ``X``. Annotations that cannot be evaluated are treated as plain values.
    """

    policy: DependencyAnnotationPolicy = field(default_factory=DependencyAnnotationPolicy)
    _types: dict[str, type[Any]] = field(default_factory=dict, init=False, repr=False)
    _descriptors: dict[str, TypeDescriptor] = field(default_factory=dict, init=False, repr=False)

    def describe(self, identifier: str) -> TypeDescriptor:
        """Return the type descriptor for a dotted class path.

        Args:
            identifier: Dotted class path, e.g. ``"app.services.UserService"``.

        Raises:
            DepWireTypeNotFoundError: If the identifier does not name a class.
            DepWireNotInstantiableError: If the constructor signature cannot be
                inspected.

        """
        descriptor = self._descriptors.get(identifier)
        if descriptor is not None:
            return descriptor

        cls = self._types.get(identifier)
        if cls is None:
            cls = import_type(identifier)
        descriptor = self._describe_class(identifier, cls)
        self._types.setdefault(identifier, cls)
        self._descriptors[identifier] = descriptor
        return descriptor

    def record(self, cls: type[Any]) -> str:
        """Remember a class so its identifier resolves without importing it.

        The first class recorded under an identifier wins.

        Args:
            cls: Class handed to the container or found in an annotation.

        Returns:
            The identifier of ``cls``.

        """
        identifier = identifier_for(cls)
        self._types.setdefault(identifier, cls)
        return identifier

    def build(self, identifier: str, args: Sequence[Any]) -> Any:
        """Instantiate the class named by ``identifier`` with ordered arguments.

        Keyword-only parameters receive their values by name; all other
        arguments are passed positionally.

        Args:
            identifier: Dotted class path that was described before.
            args: Argument values in constructor parameter order.

        """
        descriptor = self.describe(identifier)
        cls = self._types[identifier]

        positional: list[Any] = []
        keywords: dict[str, Any] = {}
        for parameter, value in zip(descriptor.parameters, args):
            if parameter.kind is ParameterKind.KEYWORD:
                keywords[parameter.name] = value
            else:
                positional.append(value)
        return cls(*positional, **keywords)

    def _describe_class(self, identifier: str, cls: type[Any]) -> TypeDescriptor:
        if not self.policy.is_instantiable(cls):
            return TypeDescriptor(identifier=identifier, is_instantiable=False, has_constructor=False)

        if is_pydantic_settings_subclass(cls):
            logger.debug("Describing settings model %s as parameterless", identifier)
            return TypeDescriptor(identifier=identifier, has_constructor=False)

        if cls.__init__ is object.__init__ and cls.__new__ is object.__new__:
            return TypeDescriptor(identifier=identifier, has_constructor=False)

        if is_non_public_constructor(cls.__init__):
            return TypeDescriptor(
                identifier=identifier,
                visibility=ConstructorVisibility.NON_PUBLIC,
            )

        return TypeDescriptor(
            identifier=identifier,
            parameters=self._describe_parameters(identifier, cls),
        )

    def _describe_parameters(
        self,
        identifier: str,
        cls: type[Any],
    ) -> tuple[ParameterDescriptor, ...]:
        try:
            signature = inspect.signature(cls)
        except (TypeError, ValueError) as error:
            raise DepWireNotInstantiableError(
                identifier,
                "its constructor signature cannot be inspected",
            ) from error

        annotations = self._resolved_type_hints(cls)
        descriptors: list[ParameterDescriptor] = []
        for parameter in signature.parameters.values():
            if parameter.kind in _VARIADIC_KINDS:
                continue
            annotation = annotations.get(parameter.name, _MISSING_ANNOTATION)
            if annotation is _MISSING_ANNOTATION:
                annotation = parameter.annotation
            descriptors.append(
                ParameterDescriptor(
                    name=parameter.name,
                    depends_on=self._dependency_identifier(annotation),
                    default=MISSING if parameter.default is Parameter.empty else parameter.default,
                    kind=(
                        ParameterKind.KEYWORD
                        if parameter.kind is Parameter.KEYWORD_ONLY
                        else ParameterKind.POSITIONAL
                    ),
                ),
            )
        return tuple(descriptors)

    def _resolved_type_hints(self, cls: type[Any]) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for member_name in ("__init__", "__new__"):
            member = getattr(cls, member_name)
            try:
                hints = get_type_hints(member, include_extras=True)
            except (AttributeError, NameError, TypeError) as error:
                logger.debug("Unable to evaluate %s.%s annotations: %s", cls.__qualname__, member_name, error)
                continue
            for name, hint in hints.items():
                merged.setdefault(name, hint)
        return merged

    def _dependency_identifier(self, annotation: Any) -> str | None:
        if annotation is Parameter.empty or isinstance(annotation, str):
            return None

        marker = extract_depends_on(annotation)
        if marker is not None:
            return marker.identifier

        candidate = self._strip_optional(strip_annotated(annotation))
        marker = extract_depends_on(candidate)
        if marker is not None:
            return marker.identifier

        candidate = strip_annotated(candidate)
        if self.policy.is_dependency_class(candidate):
            return self.record(candidate)
        return None

    def _strip_optional(self, annotation: Any) -> Any:
        if get_origin(annotation) not in (Union, types.UnionType):
            return annotation
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
        return annotation


__all__ = ["ReflectionTypeMetadataProvider"]
