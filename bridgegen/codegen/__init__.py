"""
Namespace code generation.

Turns the metadata table of a live module or class into a static Python
module of lazily bound declarations.
"""

from .config import NamespaceOptions, load_options
from .descriptor import AttributeDescriptor, AttributeKind
from .errors import (
    ConfigurationError,
    GeneratorError,
    LiveAttributeMissing,
    MetadataError,
    OutputError,
    TemplateError,
)
from .escaping import escape_doc, escape_quotes
from .generator import GenerationResult, NamespaceEmitter, generate
from .naming import DEFAULT_EXCLUDE, host_identifier
from .planner import GenerationPlan, plan_generation
from .templates import TemplateEngine, create_template_engine, select_template

__all__ = [
    # Entry points
    "generate",
    "NamespaceEmitter",
    "GenerationResult",
    # Data model
    "AttributeDescriptor",
    "AttributeKind",
    "GenerationPlan",
    "plan_generation",
    # Configuration
    "NamespaceOptions",
    "load_options",
    "DEFAULT_EXCLUDE",
    # Text and naming helpers
    "escape_quotes",
    "escape_doc",
    "host_identifier",
    # Templates
    "TemplateEngine",
    "create_template_engine",
    "select_template",
    # Errors
    "GeneratorError",
    "ConfigurationError",
    "OutputError",
    "MetadataError",
    "TemplateError",
    "LiveAttributeMissing",
]
