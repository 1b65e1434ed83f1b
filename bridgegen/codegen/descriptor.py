"""
Attribute descriptors for namespace generation.

Converts the raw table returned by a metadata source into immutable
AttributeDescriptor records the templates can work with consistently.
"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Tuple

from .errors import MetadataError


class AttributeKind(Enum):
    """Closed set of attribute kinds a declaration can be emitted for."""

    SCALAR = "scalar"
    LIST = "list"
    TUPLE = "tuple"
    MAPPING = "mapping"
    CALLABLE = "callable"
    GENERIC = "generic"


_KIND_NAMES = {
    "scalar": AttributeKind.SCALAR,
    "list": AttributeKind.LIST,
    "tuple": AttributeKind.TUPLE,
    "dict": AttributeKind.MAPPING,
    "map": AttributeKind.MAPPING,
    "mapping": AttributeKind.MAPPING,
    "callable": AttributeKind.CALLABLE,
    "generic": AttributeKind.GENERIC,
}

SCALAR_TYPES = (str, int, float, bool)

_EMPTY_FLAGS: Mapping[str, Any] = MappingProxyType({})


def parse_kind(raw_kind: Any) -> Optional[AttributeKind]:
    """
    Map a raw kind value onto AttributeKind.

    Unrecognised kinds become GENERIC instead of failing the run.

    Args:
        raw_kind: Kind as an AttributeKind, a string, or None

    Returns:
        The matching kind, or None when no kind was given
    """
    if raw_kind is None:
        return None
    if isinstance(raw_kind, AttributeKind):
        return raw_kind
    return _KIND_NAMES.get(str(raw_kind).lower().lstrip(":"), AttributeKind.GENERIC)


def is_literal_value(value: Any) -> bool:
    """Check whether ``value`` can be inlined as a Python literal."""
    # Subclasses such as IntEnum members have no plain literal form
    if type(value) not in SCALAR_TYPES:
        return False
    if type(value) is float and not math.isfinite(value):
        return False
    return True


@dataclass(frozen=True)
class AttributeDescriptor:
    """Metadata describing one attribute of the foreign object."""

    name: str
    kind: Optional[AttributeKind] = None
    doc: Optional[str] = None
    flags: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_FLAGS)
    arglist: Optional[Tuple[str, ...]] = None
    value: Any = None

    @property
    def is_callable(self) -> bool:
        """True when the metadata source flagged the attribute as callable."""
        return bool(self.flags.get("callable") or self.flags.get("callable?"))

    @property
    def has_literal_value(self) -> bool:
        return is_literal_value(self.value)

    @classmethod
    def from_raw(cls, name: str, raw: Any) -> "AttributeDescriptor":
        """
        Build a descriptor from one metadata table entry.

        Args:
            name: Foreign attribute name (the table key)
            raw: An AttributeDescriptor or a mapping with the keys ``type``
                (or ``kind``), ``doc``, ``flags``, ``arglists`` (or
                ``arglist``) and ``value``

        Returns:
            Immutable descriptor

        Raises:
            MetadataError: If a field has the wrong shape
        """
        if isinstance(raw, AttributeDescriptor):
            return raw if raw.name == name else replace(raw, name=name)
        if not isinstance(raw, Mapping):
            raise MetadataError(
                f"Metadata for '{name}' must be a mapping, got {type(raw).__name__}"
            )

        doc = raw.get("doc")
        if doc is not None and not isinstance(doc, str):
            raise MetadataError(f"Docstring for '{name}' must be a string or None")

        flags = raw.get("flags")
        if flags is None:
            flags = _EMPTY_FLAGS
        elif isinstance(flags, Mapping):
            flags = MappingProxyType(dict(flags))
        elif isinstance(flags, (set, frozenset, list, tuple)):
            # Flag sets name the flags that are switched on
            flags = MappingProxyType({str(flag): True for flag in flags})
        else:
            raise MetadataError(f"Flags for '{name}' must be a mapping or a set")

        raw_kind = raw.get("kind", raw.get("type"))

        return cls(
            name=name,
            kind=parse_kind(raw_kind),
            doc=doc,
            flags=flags,
            arglist=_parse_arglist(name, raw.get("arglists", raw.get("arglist"))),
            value=raw.get("value"),
        )


def _parse_arglist(name: str, arglist: Any) -> Optional[Tuple[str, ...]]:
    if arglist is None:
        return None
    if isinstance(arglist, str) or not isinstance(arglist, (list, tuple)):
        raise MetadataError(f"Argument list for '{name}' must be a list of strings")
    for spec in arglist:
        if not isinstance(spec, str):
            raise MetadataError(
                f"Argument list for '{name}' contains a non-string entry: {spec!r}"
            )
    return tuple(arglist)


def is_descriptor_entry(name: Any, raw: Any) -> bool:
    """Check whether a table entry is eligible for a declaration at all."""
    return isinstance(name, str) and isinstance(raw, (Mapping, AttributeDescriptor))


def iter_table(table: Any) -> Iterator[Tuple[Any, Any]]:
    """
    Iterate a metadata table in its natural order.

    Raises:
        MetadataError: If the table is not a mapping
    """
    if not isinstance(table, Mapping):
        raise MetadataError(
            f"Metadata table must be a mapping, got {type(table).__name__}"
        )
    return iter(table.items())
