"""
Lazily initialised cells backing generated declarations.

A cell runs its thunk on the first ``get()`` and caches the result for the
lifetime of the process. First caller wins. The cell is not re-entrant: a
``get()`` issued from inside its own thunk raises RuntimeError. No locking
is done; callers that share a cell across threads must coordinate.
"""

from typing import Any, Callable

_UNREALIZED = "unrealized"
_REALIZING = "realizing"
_REALIZED = "realized"


class LazyCell:
    """Single-evaluation memoized value."""

    __slots__ = ("_thunk", "_value", "_state")

    def __init__(self, thunk: Callable[[], Any]):
        if not callable(thunk):
            raise TypeError("LazyCell requires a callable")
        self._thunk = thunk
        self._value = None
        self._state = _UNREALIZED

    @property
    def realized(self) -> bool:
        return self._state == _REALIZED

    def get(self) -> Any:
        """Return the cached value, computing it on first use."""
        if self._state == _REALIZED:
            return self._value
        if self._state == _REALIZING:
            raise RuntimeError("LazyCell was re-entered while computing its value")

        self._state = _REALIZING
        try:
            value = self._thunk()
        except BaseException:
            # A failed thunk may be retried by the next caller
            self._state = _UNREALIZED
            raise

        self._value = value
        self._state = _REALIZED
        self._thunk = None
        return value

    def __repr__(self) -> str:
        if self._state == _REALIZED:
            return f"<LazyCell realized={self._value!r}>"
        return f"<LazyCell {self._state}>"


def global_delay(thunk: Callable[[], Any]) -> LazyCell:
    """Wrap ``thunk`` in a process-wide lazily initialised cell."""
    return LazyCell(thunk)
