"""
Default runtime bridge: importable Python objects as the foreign runtime.

Targets are addressed by dotted paths such as ``numpy``, ``os.path`` or
``collections.OrderedDict``. Metadata retrieval runs inside
``execution_context()``, a process-wide lock that keeps a single run
talking to the runtime at a time.
"""

import importlib
import threading
from contextlib import contextmanager
from typing import Any, Iterator

from ..logging_config import get_logger

logger = get_logger(__name__)

_EXECUTION_LOCK = threading.RLock()


@contextmanager
def execution_context() -> Iterator[None]:
    """Hold the runtime's execution context for the duration of the block."""
    with _EXECUTION_LOCK:
        yield


def _is_missing_module(error: ModuleNotFoundError, module_name: str) -> bool:
    # Only swallow "this path is not a module"; a missing dependency of a
    # module that does exist must propagate.
    missing = error.name
    return missing is None or module_name == missing or module_name.startswith(
        missing + "."
    )


def path_to_object(path: str) -> Any:
    """
    Resolve a dotted path to a live object.

    The longest importable module prefix is imported and the remaining
    segments are looked up as attributes.

    Raises:
        ImportError: If no prefix is importable or an attribute is missing
    """
    if not path or not isinstance(path, str):
        raise ImportError(f"Invalid object path: {path!r}")

    parts = path.split(".")
    for split in range(len(parts), 0, -1):
        module_name = ".".join(parts[:split])
        try:
            obj = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            if not _is_missing_module(e, module_name):
                raise
            continue

        for attr in parts[split:]:
            try:
                obj = getattr(obj, attr)
            except AttributeError as e:
                raise ImportError(
                    f"Cannot resolve '{path}': '{module_name}' has no attribute path "
                    f"'{'.'.join(parts[split:])}'"
                ) from e
        logger.debug("Resolved %s via module %s", path, module_name)
        return obj

    raise ImportError(f"No module found for path '{path}'", name=parts[0])


def get_attr(obj: Any, name: str) -> Any:
    return getattr(obj, name)


def has_attr(obj: Any, name: str) -> bool:
    return hasattr(obj, name)


class PythonBridge:
    """Bridge used by the emitter to query the live target."""

    def resolve(self, target: str) -> Any:
        return path_to_object(target)

    def has_attr(self, obj: Any, name: str) -> bool:
        return has_attr(obj, name)

    def execution_context(self):
        return execution_context()
