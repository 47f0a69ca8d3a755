"""Test doubles shared across the depwire test suite."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import Any

from depwire import ReflectionTypeMetadataProvider, TypeDescriptor


class CountingMetadataProvider:
    """Reflection provider wrapper that counts metadata lookups and builds."""

    def __init__(self) -> None:
        self.inner = ReflectionTypeMetadataProvider()
        self.describe_calls: Counter[str] = Counter()
        self.build_calls: Counter[str] = Counter()

    def describe(self, identifier: str) -> TypeDescriptor:
        self.describe_calls[identifier] += 1
        return self.inner.describe(identifier)

    def build(self, identifier: str, args: Sequence[Any]) -> Any:
        self.build_calls[identifier] += 1
        return self.inner.build(identifier, args)

    def record(self, cls: type[Any]) -> str:
        return self.inner.record(cls)
