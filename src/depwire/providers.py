from depwire._internal.identifiers import identifier_for
from depwire._internal.reflection import ReflectionTypeMetadataProvider
from depwire._internal.static_metadata import StaticTypeMetadataProvider

__all__ = [
    "ReflectionTypeMetadataProvider",
    "StaticTypeMetadataProvider",
    "identifier_for",
]
