from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from depwire.exceptions import DepWireInvocationFailedError, DepWireNotFoundError


@dataclass(frozen=True, slots=True)
class Resolved:
    """The identifier was resolved and its factory built a value."""

    identifier: str
    value: Any


@dataclass(frozen=True, slots=True)
class NotFound:
    """The identifier could not be resolved into a factory."""

    identifier: str
    error: DepWireNotFoundError


@dataclass(frozen=True, slots=True)
class InvocationFailed:
    """The factory was resolved but raised while building the value."""

    identifier: str
    error: DepWireInvocationFailedError


ResolutionOutcome = Resolved | NotFound | InvocationFailed
"""Result of ``Container.try_get``.

Branch with ``match``/``isinstance`` instead of catching exceptions:

.. code-block:: python

    match container.try_get("app.Service"):
        case Resolved(value=service):
            service.run()
        case NotFound(error=error):
            log.warning("not wired: %s", error)
        case InvocationFailed(error=error):
            raise error
"""


__all__ = ["InvocationFailed", "NotFound", "Resolved", "ResolutionOutcome"]
