"""Static metadata: wire identifiers that are not import paths.

``StaticTypeMetadataProvider`` replaces runtime inspection with a declared
table of descriptors and builders, the shape generated wiring code takes.
"""

from __future__ import annotations

from depwire import Container, ParameterDescriptor, StaticTypeMetadataProvider


class Cache:
    def __init__(self, size: int) -> None:
        self.size = size


class Catalog:
    def __init__(self, cache: Cache) -> None:
        self.cache = cache


def main() -> None:
    metadata = StaticTypeMetadataProvider()
    metadata.declare("cache.backend", is_instantiable=False)
    metadata.declare("cache.lru", Cache, parameters=[ParameterDescriptor("size", default=128)])
    metadata.declare(
        "catalog",
        Catalog,
        parameters=[ParameterDescriptor("cache", depends_on="cache.backend")],
    )

    container = Container({"cache.backend": "cache.lru"}, metadata_provider=metadata)
    catalog = container.get("catalog")

    print(f"cache_size={catalog.cache.size}")  # => cache_size=128


if __name__ == "__main__":
    main()
