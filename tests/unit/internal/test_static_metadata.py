from __future__ import annotations

import pytest

from depwire import (
    ConstructorVisibility,
    DepWireTypeNotFoundError,
    InstanceBuilder,
    ParameterDescriptor,
    ParameterKind,
    StaticTypeMetadataProvider,
    TypeMetadataProvider,
)


def test_satisfies_both_collaborator_protocols() -> None:
    metadata = StaticTypeMetadataProvider()

    assert isinstance(metadata, TypeMetadataProvider)
    assert isinstance(metadata, InstanceBuilder)


def test_declare_returns_descriptor() -> None:
    metadata = StaticTypeMetadataProvider()

    descriptor = metadata.declare(
        "Service",
        dict,
        parameters=[ParameterDescriptor("a", depends_on="A")],
        visibility=ConstructorVisibility.NON_PUBLIC,
    )

    assert metadata.describe("Service") is descriptor
    assert descriptor.parameters[0].depends_on == "A"
    assert descriptor.visibility is ConstructorVisibility.NON_PUBLIC


def test_instantiable_declaration_requires_builder() -> None:
    with pytest.raises(ValueError, match="needs a builder"):
        StaticTypeMetadataProvider().declare("Service")


def test_interface_declaration_cannot_be_built() -> None:
    metadata = StaticTypeMetadataProvider()
    metadata.declare("Port", is_instantiable=False)

    with pytest.raises(DepWireTypeNotFoundError):
        metadata.build("Port", [])


def test_unknown_identifier() -> None:
    with pytest.raises(DepWireTypeNotFoundError, match="no metadata was declared"):
        StaticTypeMetadataProvider().describe("Missing")


def test_build_maps_keyword_parameters() -> None:
    metadata = StaticTypeMetadataProvider()
    metadata.declare(
        "Pair",
        lambda left, *, right: (left, right),
        parameters=[
            ParameterDescriptor("left"),
            ParameterDescriptor("right", kind=ParameterKind.KEYWORD),
        ],
    )

    assert metadata.build("Pair", [1, 2]) == (1, 2)


def test_redeclaring_replaces_metadata_and_builder() -> None:
    metadata = StaticTypeMetadataProvider()
    metadata.declare("Value", lambda: 1)
    metadata.declare("Value", lambda: 2)

    assert metadata.build("Value", []) == 2
