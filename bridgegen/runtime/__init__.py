"""
Runtime facilities imported by generated namespace modules.

Generated code only relies on the names exported here.
"""

from .adapters import (
    ForeignCallable,
    ForeignList,
    ForeignMapping,
    ForeignObject,
    ForeignProxy,
    as_callable,
    as_list,
    as_mapping,
    as_object,
    attach_metadata,
    unwrap,
)
from .bridge import PythonBridge, execution_context, get_attr, has_attr, path_to_object
from .lazy import LazyCell, global_delay

__all__ = [
    # Lazy cells
    "LazyCell",
    "global_delay",
    # Adapters
    "ForeignProxy",
    "ForeignList",
    "ForeignMapping",
    "ForeignCallable",
    "ForeignObject",
    "as_list",
    "as_mapping",
    "as_callable",
    "as_object",
    "attach_metadata",
    "unwrap",
    # Bridge
    "PythonBridge",
    "execution_context",
    "path_to_object",
    "get_attr",
    "has_attr",
]
