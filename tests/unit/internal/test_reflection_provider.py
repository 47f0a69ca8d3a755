from __future__ import annotations

import dataclasses
import datetime
import enum
import pathlib
import uuid
from abc import ABC, abstractmethod
from typing import Annotated, Any, NamedTuple, Protocol

import pytest

from depwire import (
    ConstructorVisibility,
    Container,
    DependsOn,
    DepWireAutowireFailedError,
    DepWireTypeNotFoundError,
    ParameterKind,
    ReflectionTypeMetadataProvider,
    identifier_for,
    non_public_constructor,
)
from depwire._internal.identifiers import import_type, normalize_identifier


class Dependency:
    pass


class Service:
    def __init__(
        self,
        dependency: Dependency,
        count: int,
        name: str = "svc",
        *args: object,
        flag: bool = False,
        **kwargs: object,
    ) -> None:
        self.dependency = dependency


class Mode(enum.Enum):
    FAST = "fast"
    SAFE = "safe"


class ValueTypes:
    def __init__(
        self,
        path: pathlib.Path,
        when: datetime.datetime,
        key: uuid.UUID,
        kind: type[Dependency],
        mode: Mode = Mode.FAST,
        extra: Any = None,
    ) -> None:
        pass


class Outer:
    class Inner:
        pass


class Port(Protocol):
    def send(self) -> None: ...


class AbstractPort(ABC):
    @abstractmethod
    def send(self) -> None: ...


class Sealed:
    @non_public_constructor
    def __init__(self, dependency: Dependency) -> None:
        self.dependency = dependency


class Unresolved:
    def __init__(self, dependency: "NotDefinedAnywhere") -> None:  # type: ignore[name-defined]  # noqa: F821
        self.dependency = dependency


class Marked:
    def __init__(self, port: Annotated[Port, DependsOn("ports.Primary")]) -> None:
        self.port = port


class OptionalMarked:
    def __init__(self, port: Annotated[Port, DependsOn("ports.Primary")] | None = None) -> None:
        self.port = port


@dataclasses.dataclass
class DataService:
    dependency: Dependency
    retries: int = 3


class Point(NamedTuple):
    x: int = 0
    y: int = 0


@pytest.fixture()
def provider() -> ReflectionTypeMetadataProvider:
    return ReflectionTypeMetadataProvider()


class TestDescribe:
    def test_parameters_in_declared_order(self, provider: ReflectionTypeMetadataProvider) -> None:
        descriptor = provider.describe(identifier_for(Service))

        assert descriptor.is_instantiable is True
        assert descriptor.has_constructor is True
        assert descriptor.visibility is ConstructorVisibility.PUBLIC
        assert [parameter.name for parameter in descriptor.parameters] == [
            "dependency",
            "count",
            "name",
            "flag",
        ]

    def test_dependency_annotations(self, provider: ReflectionTypeMetadataProvider) -> None:
        dependency, count, name, flag = provider.describe(identifier_for(Service)).parameters

        assert dependency.depends_on == identifier_for(Dependency)
        assert dependency.has_default is False
        assert count.depends_on is None
        assert count.has_default is False
        assert name.depends_on is None
        assert name.default == "svc"
        assert flag.kind is ParameterKind.KEYWORD
        assert flag.default is False

    def test_value_like_annotations_are_not_dependencies(
        self,
        provider: ReflectionTypeMetadataProvider,
    ) -> None:
        parameters = provider.describe(identifier_for(ValueTypes)).parameters

        assert [parameter.depends_on for parameter in parameters] == [None] * 6

    def test_class_without_constructor(self, provider: ReflectionTypeMetadataProvider) -> None:
        descriptor = provider.describe(identifier_for(Dependency))

        assert descriptor.has_constructor is False
        assert descriptor.parameters == ()

    def test_protocol_is_not_instantiable(self, provider: ReflectionTypeMetadataProvider) -> None:
        assert provider.describe(identifier_for(Port)).is_instantiable is False

    def test_abstract_class_is_not_instantiable(
        self,
        provider: ReflectionTypeMetadataProvider,
    ) -> None:
        assert provider.describe(identifier_for(AbstractPort)).is_instantiable is False

    def test_marked_constructor_is_non_public(
        self,
        provider: ReflectionTypeMetadataProvider,
    ) -> None:
        descriptor = provider.describe(identifier_for(Sealed))

        assert descriptor.has_constructor is True
        assert descriptor.visibility is ConstructorVisibility.NON_PUBLIC

    def test_unresolvable_annotation_is_treated_as_plain_value(
        self,
        provider: ReflectionTypeMetadataProvider,
    ) -> None:
        (parameter,) = provider.describe(identifier_for(Unresolved)).parameters

        assert parameter.depends_on is None

    def test_depends_on_marker(self, provider: ReflectionTypeMetadataProvider) -> None:
        (parameter,) = provider.describe(identifier_for(Marked)).parameters

        assert parameter.depends_on == "ports.Primary"

    def test_depends_on_marker_inside_optional(
        self,
        provider: ReflectionTypeMetadataProvider,
    ) -> None:
        (parameter,) = provider.describe(identifier_for(OptionalMarked)).parameters

        assert parameter.depends_on == "ports.Primary"
        assert parameter.default is None

    def test_dataclass_fields(self, provider: ReflectionTypeMetadataProvider) -> None:
        dependency, retries = provider.describe(identifier_for(DataService)).parameters

        assert dependency.depends_on == identifier_for(Dependency)
        assert retries.default == 3

    def test_named_tuple(self, provider: ReflectionTypeMetadataProvider) -> None:
        descriptor = provider.describe(identifier_for(Point))

        assert [parameter.name for parameter in descriptor.parameters] == ["x", "y"]

    def test_descriptors_are_cached(self, provider: ReflectionTypeMetadataProvider) -> None:
        identifier = identifier_for(Service)

        assert provider.describe(identifier) is provider.describe(identifier)


class TestBuild:
    def test_passes_keyword_only_arguments_by_name(
        self,
        provider: ReflectionTypeMetadataProvider,
    ) -> None:
        dependency = Dependency()

        service = provider.build(identifier_for(Service), [dependency, 1, "x", True])

        assert isinstance(service, Service)
        assert service.dependency is dependency

    def test_builds_named_tuple(self, provider: ReflectionTypeMetadataProvider) -> None:
        assert provider.build(identifier_for(Point), [1, 2]) == Point(1, 2)


class TestImportType:
    def test_dotted_path(self) -> None:
        assert import_type(identifier_for(Service)) is Service

    def test_nested_class(self) -> None:
        assert import_type(identifier_for(Outer.Inner)) is Outer.Inner

    def test_colon_form(self) -> None:
        assert import_type(f"{Outer.__module__}:Outer.Inner") is Outer.Inner

    def test_standard_library_class(self) -> None:
        assert import_type("collections.OrderedDict").__name__ == "OrderedDict"

    def test_builtin_name(self) -> None:
        assert import_type("dict") is dict

    @pytest.mark.parametrize(
        "identifier",
        [
            "definitely_missing_module.Type",
            "collections.NoSuchType",
            "collections:NoSuchType",
            "missing_module:Type",
            "json.dumps",
            "json",
            "NoSuchBuiltin",
        ],
    )
    def test_unknown_identifiers(self, identifier: str) -> None:
        with pytest.raises(DepWireTypeNotFoundError):
            import_type(identifier)

    @pytest.mark.parametrize(
        "identifier",
        ["depwire_sample_plugin.Service", "depwire_sample_plugin:Service"],
    )
    def test_missing_import_inside_existing_module_surfaces(
        self,
        identifier: str,
        tmp_path: pathlib.Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        # The missing module's name is a string prefix of the requested one.
        (tmp_path / "depwire_sample_plugin.py").write_text(
            "import depwire_sample\n\n\nclass Service:\n    pass\n",
        )
        monkeypatch.syspath_prepend(str(tmp_path))

        with pytest.raises(ModuleNotFoundError) as exc_info:
            import_type(identifier)

        assert exc_info.value.name == "depwire_sample"

    def test_missing_import_is_chained_by_container(
        self,
        tmp_path: pathlib.Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        (tmp_path / "depwire_sample_plugin.py").write_text(
            "import depwire_sample\n\n\nclass Service:\n    pass\n",
        )
        monkeypatch.syspath_prepend(str(tmp_path))

        with pytest.raises(DepWireAutowireFailedError) as exc_info:
            Container().get("depwire_sample_plugin.Service")

        assert isinstance(exc_info.value.__cause__, ModuleNotFoundError)
        assert exc_info.value.__cause__.name == "depwire_sample"


class TestNormalizeIdentifier:
    def test_string_is_unchanged(self) -> None:
        assert normalize_identifier("anything") == "anything"

    def test_class_is_converted(self) -> None:
        assert normalize_identifier(Service) == f"{Service.__module__}.Service"

    def test_builtin_class_uses_bare_name(self) -> None:
        assert normalize_identifier(int) == "int"

    def test_rejects_other_values(self) -> None:
        with pytest.raises(TypeError):
            normalize_identifier(42)  # type: ignore[arg-type]
