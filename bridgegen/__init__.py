"""
bridgegen

Generates static Python namespace modules for dynamically introspected
modules and classes.
"""

from .codegen import (
    DEFAULT_EXCLUDE,
    GenerationResult,
    GeneratorError,
    NamespaceEmitter,
    NamespaceOptions,
    generate,
    load_options,
)

__version__ = "0.1.0"

__all__ = [
    "generate",
    "NamespaceEmitter",
    "NamespaceOptions",
    "GenerationResult",
    "GeneratorError",
    "DEFAULT_EXCLUDE",
    "load_options",
]
