"""Import helpers for undox."""

import importlib
from typing import Any


def import_from_path(path: str) -> Any:
    """Import an object from a ``module.submodule:attribute`` path.

    Args:
        path: Import path with a colon separating module and attribute

    Returns:
        The imported object

    Raises:
        ValueError: If the path is malformed
        ImportError: If the module cannot be imported
        AttributeError: If the attribute does not exist
    """
    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Invalid import path (expected module.submodule:name): {path}")

    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)
    return obj
