from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from contextlib import AbstractContextManager, nullcontext
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from depwire.exceptions import DepWireDuplicateRegistrationError
from depwire.lock_mode import LockMode

if TYPE_CHECKING:
    from depwire._internal.container import Container

Factory = Callable[["Container"], Any]

logger = logging.getLogger(__name__)


class FactoryRegistry:
    """Hold overrides, cached factories, and the set of manual registrations.

    Factories are write-once: nothing is ever replaced or evicted. With
    ``LockMode.THREAD`` every insert happens under one lock, so concurrent
    inserts for the same identifier keep only the first factory.
    """

    __slots__ = ("_factories", "_lock", "_manual", "_overrides")

    def __init__(
        self,
        overrides: Mapping[str, str] | None = None,
        *,
        lock_mode: LockMode = LockMode.THREAD,
    ) -> None:
        self._overrides: Mapping[str, str] = MappingProxyType(dict(overrides or {}))
        self._factories: dict[str, Factory] = {}
        self._manual: set[str] = set()
        self._lock: AbstractContextManager[Any] = (
            threading.Lock() if lock_mode is LockMode.THREAD else nullcontext()
        )

    @property
    def overrides(self) -> Mapping[str, str]:
        return self._overrides

    def target_for(self, identifier: str) -> str:
        return self._overrides.get(identifier, identifier)

    def get(self, identifier: str) -> Factory | None:
        return self._factories.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def is_manual(self, identifier: str) -> bool:
        return identifier in self._manual

    def register(self, identifier: str, factory: Factory) -> None:
        """Store a manual factory.

        Raises:
            DepWireDuplicateRegistrationError: If ``identifier`` already has a
                factory, manual or autowired.

        """
        with self._lock:
            if identifier in self._factories:
                raise DepWireDuplicateRegistrationError(identifier)
            self._factories[identifier] = factory
            self._manual.add(identifier)
        logger.debug("Registered manual factory for %s", identifier)

    def store(self, identifier: str, factory: Factory) -> Factory:
        """Cache an autowired factory unless one is already present.

        Returns:
            The factory cached for ``identifier`` after the call: ``factory``
            itself, or the one another thread stored first.

        """
        with self._lock:
            existing = self._factories.setdefault(identifier, factory)
        if existing is not factory:
            logger.debug("Discarded autowired factory for %s, another one was cached first", identifier)
        return existing


__all__ = ["Factory", "FactoryRegistry"]
