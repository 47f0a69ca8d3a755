from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, NamedTuple, TypeVar, get_args, get_origin

F = TypeVar("F", bound=Callable[..., Any])

_NON_PUBLIC_CONSTRUCTOR_ATTR = "__depwire_non_public_constructor__"
_ANNOTATED_MARKER_MIN_ARGS = 2


class DependsOn(NamedTuple):
    """Name the identifier a constructor parameter depends on.

    Attach ``DependsOn`` metadata to ``typing.Annotated`` when the dependency
    should be looked up under an identifier other than the annotated class,
    for example an interface identifier that is mapped through overrides.

    Examples:
        .. code-block:: python

            class Service:
                def __init__(
                    self,
                    logger: Annotated[Logger, DependsOn("app.logging.Logger")],
                ) -> None: ...

    """

    identifier: str


def non_public_constructor(init: F) -> F:
    """Mark an ``__init__`` as not callable by the container.

    Python has no private constructors; classes decorated this way are meant
    to be built through alternative constructors (``from_config`` and similar).
    Autowiring such a class fails with ``DepWireInaccessibleConstructorError``.

    Args:
        init: The ``__init__`` function to mark.

    Returns:
        The same function, marked.

    """
    setattr(init, _NON_PUBLIC_CONSTRUCTOR_ATTR, True)
    return init


def is_non_public_constructor(init: object) -> bool:
    return bool(getattr(init, _NON_PUBLIC_CONSTRUCTOR_ATTR, False))


def extract_depends_on(annotation: Any) -> DependsOn | None:
    """Return the first ``DependsOn`` marker of an ``Annotated`` type, if any."""
    if get_origin(annotation) is not Annotated:
        return None
    args = get_args(annotation)
    if len(args) < _ANNOTATED_MARKER_MIN_ARGS:
        return None
    for metadata in args[1:]:
        if isinstance(metadata, DependsOn):
            return metadata
    return None


def strip_annotated(annotation: Any) -> Any:
    if get_origin(annotation) is Annotated:
        return get_args(annotation)[0]
    return annotation


__all__ = [
    "DependsOn",
    "extract_depends_on",
    "is_non_public_constructor",
    "non_public_constructor",
    "strip_annotated",
]
