from __future__ import annotations

from dataclasses import dataclass, field

from depwire.exceptions import DepWireCircularDependencyError


@dataclass(slots=True)
class ResolutionStack:
    """Track the identifiers being autowired by one top-level resolution.

    Each top-level call creates its own stack and passes it down every
    recursive frame, so concurrent resolutions never see each other's
    progress. Insertion order is the call chain.
    """

    _targets: dict[str, str] = field(default_factory=dict)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._targets

    def __len__(self) -> int:
        return len(self._targets)

    def push(self, identifier: str, target: str) -> None:
        """Enter an identifier, failing when it is already being resolved.

        Raises:
            DepWireCircularDependencyError: If ``identifier`` is already on the
                stack. The chain starts at its first occurrence and ends with
                the repeat.

        """
        if identifier in self._targets:
            raise DepWireCircularDependencyError(self.cycle_from(identifier))
        self._targets[identifier] = target

    def pop(self, identifier: str) -> str:
        return self._targets.pop(identifier)

    def cycle_from(self, identifier: str) -> tuple[str, ...]:
        chain = list(self._targets)
        return (*chain[chain.index(identifier) :], identifier)

    def clear(self) -> None:
        self._targets.clear()

    def identifiers(self) -> tuple[str, ...]:
        return tuple(self._targets)


__all__ = ["ResolutionStack"]
