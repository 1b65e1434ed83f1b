"""
Default metadata source built on ``inspect``.

Describes every public attribute of a live module or class as a raw
descriptor mapping in the shape AttributeDescriptor.from_raw accepts.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .codegen.descriptor import is_literal_value
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TargetMetadata:
    """Descriptor table and docstring of one target."""

    doc: Optional[str] = None
    attributes: Mapping[str, Any] = field(default_factory=dict)


def format_arglist(value: Any) -> Optional[Tuple[str, ...]]:
    """
    Return the parameter specs of a callable, or None if unavailable.

    Positional-only and keyword-only boundaries are kept as ``/`` and ``*``
    entries.
    """
    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        return None

    specs: List[str] = []
    saw_positional_only = False
    saw_var_positional = False
    for param in signature.parameters.values():
        if saw_positional_only and param.kind is not param.POSITIONAL_ONLY:
            specs.append("/")
            saw_positional_only = False
        if param.kind is param.POSITIONAL_ONLY:
            saw_positional_only = True
        elif param.kind is param.VAR_POSITIONAL:
            saw_var_positional = True
        elif param.kind is param.KEYWORD_ONLY and not saw_var_positional:
            specs.append("*")
            saw_var_positional = True
        specs.append(str(param))
    if saw_positional_only:
        specs.append("/")
    return tuple(specs)


def describe_value(value: Any) -> Dict[str, Any]:
    """Build the raw descriptor for one attribute value."""
    if is_literal_value(value):
        return {"type": "scalar", "value": value, "doc": None}

    is_callable = callable(value)
    descriptor: Dict[str, Any] = {
        "type": type(value).__name__,
        "flags": {"callable": is_callable},
        "doc": None,
    }
    if is_callable or inspect.ismodule(value):
        descriptor["doc"] = inspect.getdoc(value)
    if is_callable:
        descriptor["arglists"] = format_arglist(value)
    return descriptor


class InspectMetadataSource:
    """Metadata source for importable Python modules and classes."""

    def __init__(self, include_private: bool = False):
        self.include_private = include_private

    def describe(self, target: Any) -> TargetMetadata:
        """
        Describe the attributes of ``target``.

        Args:
            target: Live module or class

        Returns:
            TargetMetadata with attributes in ``dir()`` order
        """
        attributes: Dict[str, Any] = {}
        for name in dir(target):
            if name.startswith("_") and not self.include_private:
                continue
            try:
                value = getattr(target, name)
            except AttributeError:
                logger.debug("Attribute %s listed by dir() but not readable", name)
                continue
            attributes[name] = describe_value(value)

        doc = getattr(target, "__doc__", None)
        if not isinstance(doc, str):
            doc = None

        logger.debug("Described %d attributes", len(attributes))
        return TargetMetadata(doc=doc, attributes=attributes)
