from __future__ import annotations

import importlib
from typing import Any

from depwire._internal.type_checks import is_runtime_class
from depwire.exceptions import DepWireTypeNotFoundError

_BUILTINS_MODULE = "builtins"
_MODULE_SEPARATOR = ":"


def identifier_for(cls: type[Any]) -> str:
    """Return the identifier the container uses for a class.

    Builtins are identified by their bare name; every other class by
    ``"<module>.<qualname>"``.

    Args:
        cls: Class to identify.

    """
    if cls.__module__ == _BUILTINS_MODULE:
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def normalize_identifier(value: str | type[Any]) -> str:
    """Coerce a public-API identifier argument to its string form.

    Args:
        value: Identifier string or a class.

    Raises:
        TypeError: If value is neither a string nor a class.

    """
    if isinstance(value, str):
        return value
    if is_runtime_class(value):
        return identifier_for(value)
    msg = f"Identifier must be a string or a class, got {type(value).__name__}."
    raise TypeError(msg)


def import_type(identifier: str) -> type[Any]:
    """Locate the class named by a dotted identifier.

    Accepts ``"package.module.Class"`` (the longest importable module prefix
    is used, so nested classes such as ``"module.Outer.Inner"`` work) and the
    explicit ``"package.module:Outer.Inner"`` form.

    Args:
        identifier: Dotted path of the class.

    Raises:
        DepWireTypeNotFoundError: If no module/attribute matches or the object
            found is not a class.

    """
    if _MODULE_SEPARATOR in identifier:
        module_name, _, attribute_path = identifier.partition(_MODULE_SEPARATOR)
        candidate = _walk_attributes(identifier, _import_module(identifier, module_name), attribute_path)
    else:
        candidate = _import_longest_prefix(identifier)

    if not is_runtime_class(candidate):
        raise DepWireTypeNotFoundError(identifier, "the identifier does not name a class")
    return candidate


def _import_longest_prefix(identifier: str) -> Any:
    parts = identifier.split(".")
    if len(parts) == 1:
        builtins = importlib.import_module(_BUILTINS_MODULE)
        if hasattr(builtins, identifier):
            return getattr(builtins, identifier)
        raise DepWireTypeNotFoundError(identifier, "no module path given")

    for split_at in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split_at])
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as error:
            # A missing submodule means a shorter prefix may still match. A
            # module that exists but fails on its own imports must surface.
            if error.name is not None and not _is_module_prefix(error.name, module_name):
                raise
            continue
        return _walk_attributes(identifier, module, ".".join(parts[split_at:]))

    raise DepWireTypeNotFoundError(identifier, "no importable module prefix")


def _is_module_prefix(missing: str, module_name: str) -> bool:
    return module_name == missing or module_name.startswith(f"{missing}.")


def _import_module(identifier: str, module_name: str) -> Any:
    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError as error:
        if error.name is not None and not _is_module_prefix(error.name, module_name):
            raise
        raise DepWireTypeNotFoundError(identifier, f"module '{module_name}' not found") from error


def _walk_attributes(identifier: str, module: Any, attribute_path: str) -> Any:
    candidate = module
    for attribute in attribute_path.split("."):
        try:
            candidate = getattr(candidate, attribute)
        except AttributeError as error:
            msg = f"'{attribute}' not found in '{getattr(candidate, '__name__', candidate)}'"
            raise DepWireTypeNotFoundError(identifier, msg) from error
    return candidate


__all__ = ["identifier_for", "import_type", "normalize_identifier"]
