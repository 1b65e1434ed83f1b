"""
Adapters that generated declarations wrap their lazy cells in.

Each adapter defers the attribute fetch to the first operation performed
on it, then delegates to the fetched object.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Optional, Tuple

from .lazy import LazyCell


class ForeignProxy:
    """Opaque handle to a foreign object held in a LazyCell."""

    def __init__(self, cell: LazyCell, doc: Optional[str] = None):
        self._cell = cell
        self.__doc__ = doc

    def __getattr__(self, name: str) -> Any:
        if name == "_cell":
            raise AttributeError(name)
        return getattr(self._cell.get(), name)

    def __repr__(self) -> str:
        if not self._cell.realized:
            return f"<{type(self).__name__} (unrealized)>"
        return repr(self._cell.get())

    def __str__(self) -> str:
        return str(self._cell.get())

    def __eq__(self, other: Any) -> bool:
        return self._cell.get() == unwrap(other)

    __hash__ = None


class ForeignList(ForeignProxy, Sequence):
    """List-like view of a foreign sequence."""

    def __getitem__(self, index):
        return self._cell.get()[index]

    def __len__(self) -> int:
        return len(self._cell.get())

    def __iter__(self):
        return iter(self._cell.get())

    def __contains__(self, item) -> bool:
        return item in self._cell.get()


class ForeignMapping(ForeignProxy, Mapping):
    """Mapping-like view of a foreign dictionary."""

    def __getitem__(self, key):
        return self._cell.get()[key]

    def __len__(self) -> int:
        return len(self._cell.get())

    def __iter__(self):
        return iter(self._cell.get())

    def __contains__(self, key) -> bool:
        return key in self._cell.get()


class ForeignCallable(ForeignProxy):
    """Invocable handle to a foreign callable."""

    __arglists__: Optional[Tuple[str, ...]] = None

    def __call__(self, *args, **kwargs):
        return self._cell.get()(*args, **kwargs)


class ForeignObject(ForeignProxy):
    """Generic handle for attributes of any other kind."""

    def __call__(self, *args, **kwargs):
        return self._cell.get()(*args, **kwargs)


def as_list(cell: LazyCell, doc: Optional[str] = None) -> ForeignList:
    return ForeignList(cell, doc)


def as_mapping(cell: LazyCell, doc: Optional[str] = None) -> ForeignMapping:
    return ForeignMapping(cell, doc)


def as_callable(cell: LazyCell, doc: Optional[str] = None) -> ForeignCallable:
    return ForeignCallable(cell, doc)


def as_object(cell: LazyCell, doc: Optional[str] = None) -> ForeignObject:
    return ForeignObject(cell, doc)


def attach_metadata(target: Any, doc: Optional[str] = None, arglists=None) -> Any:
    """
    Attach documentation and argument lists to a generated symbol.

    Args:
        target: Symbol to annotate
        doc: Docstring stored as ``__doc__``
        arglists: Parameter specs stored as ``__arglists__``

    Returns:
        ``target`` itself
    """
    target.__doc__ = doc
    target.__arglists__ = tuple(arglists) if arglists is not None else None
    return target


def unwrap(obj: Any) -> Any:
    """Return the foreign object behind a proxy, realizing it if needed."""
    if isinstance(obj, ForeignProxy):
        return obj._cell.get()
    return obj
