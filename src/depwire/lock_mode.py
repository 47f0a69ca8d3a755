from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for the container's factory cache.

    The resolution stack is never shared between calls, so only writes to the
    factory cache need guarding. Concurrent resolutions of the same identifier
    race to insert; the first factory stored wins and every caller receives it.
    """

    THREAD = "thread"
    """Guard cache inserts and manual registrations with ``threading.Lock``."""

    NONE = "none"
    """Disable locking for containers used from a single thread."""
