"""
Identifier resolution for generated declarations.

Foreign attribute names are used verbatim unless the caller remaps them.
Legality and uniqueness of the resulting identifiers are left to the caller.
"""

from typing import Mapping, Optional, Tuple

# Names a generated namespace commonly rebinds; declared in the module
# header as intentionally shadowed.
DEFAULT_EXCLUDE: Tuple[str, ...] = (
    "abs",
    "all",
    "any",
    "bytes",
    "compile",
    "dict",
    "eval",
    "filter",
    "float",
    "format",
    "hash",
    "id",
    "input",
    "int",
    "iter",
    "len",
    "list",
    "map",
    "max",
    "min",
    "next",
    "object",
    "open",
    "pow",
    "print",
    "range",
    "repr",
    "round",
    "set",
    "slice",
    "sorted",
    "str",
    "sum",
    "super",
    "tuple",
    "type",
    "vars",
    "zip",
)


def host_identifier(name: str, remaps: Optional[Mapping[str, str]] = None) -> str:
    """Return the identifier to declare for foreign attribute ``name``."""
    if remaps and name in remaps:
        return remaps[name]
    return name


def shadowed_names(exclude) -> Tuple[str, ...]:
    """Normalise an exclusion list to a tuple, preserving order and duplicates."""
    if exclude is None:
        return ()
    if isinstance(exclude, str):
        return (exclude,)
    return tuple(str(item) for item in exclude)
