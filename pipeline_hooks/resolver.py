"""Default resolver for listeners registered by class path."""

import importlib
from typing import Any, Union

from loguru import logger


def import_string(path: str) -> Any:
    """Import an attribute from a dotted ``package.module.Attribute`` path.

    Nested attributes (``package.module.Outer.Inner``) are supported by
    trying the longest importable module prefix first.
    """
    parts = path.split(".")
    if len(parts) < 2 or not all(parts):
        raise ImportError(f"'{path}' is not a dotted class path")

    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            target = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            # Only skip when the candidate itself is missing, not one of its imports
            if e.name and not (module_name == e.name or module_name.startswith(e.name + ".")):
                raise
            continue
        try:
            for attr in parts[split:]:
                target = getattr(target, attr)
        except AttributeError as e:
            raise ImportError(f"Module '{module_name}' has no attribute path '{path}'") from e
        return target

    raise ImportError(f"No importable module found for '{path}'")


class ImportResolver:
    """Resolve a class path or a class to a fresh instance of that class.

    Every call imports (cached by the interpreter) and instantiates anew;
    instances are not reused between dispatches. Classes are instantiated
    as given, without going through their import path.
    """

    def resolve(self, target: Union[str, type]) -> Any:
        if isinstance(target, str):
            path, target = target, import_string(target)
            logger.debug(f"Resolved listener class '{path}'")
        return target() if callable(target) else target

    def __call__(self, target: Union[str, type]) -> Any:
        return self.resolve(target)
