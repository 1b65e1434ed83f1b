"""
Template engine and per-kind declaration templates.

Wraps a Jinja2 environment holding the built-in templates for the module
header, the root object handle and one declaration form per attribute kind.
Templates found in an optional directory take precedence over the built-ins.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    select_autoescape,
)

from .descriptor import AttributeDescriptor, AttributeKind
from .errors import TemplateError
from .escaping import NO_DOCUMENTATION, escape_doc, escape_quotes

HEADER_TEMPLATE = "header"
ROOT_HANDLE_TEMPLATE = "root_handle"
SCALAR_TEMPLATE = "scalar_declaration"
LIST_TEMPLATE = "list_declaration"
MAPPING_TEMPLATE = "mapping_declaration"
CALLABLE_TEMPLATE = "callable_declaration"
GENERIC_TEMPLATE = "generic_declaration"

# Generated modules reach the runtime through private aliases so that
# declarations named like runtime helpers cannot rebind them.
_FETCH = '_rt.global_delay(lambda: _rt.get_attr(_src_obj.get(), "{{ name | escape_quotes }}"))'

BUILTIN_TEMPLATES: Dict[str, str] = {
    HEADER_TEMPLATE: '''"""{{ doc }}"""

import bridgegen.runtime as _rt

__namespace__ = "{{ namespace | escape_quotes }}"

__shadowed__ = {{ exclude | pyrepr }}''',
    ROOT_HANDLE_TEMPLATE: (
        '_src_obj = _rt.global_delay(lambda: _rt.path_to_object("{{ target | escape_quotes }}"))'
    ),
    SCALAR_TEMPLATE: '''{{ identifier }} = {{ value | literal }}
"""{{ doc }}"""''',
    LIST_TEMPLATE: '{{ identifier }} = _rt.as_list(' + _FETCH + ', doc="""{{ doc }}""")',
    MAPPING_TEMPLATE: '{{ identifier }} = _rt.as_mapping(' + _FETCH + ', doc="""{{ doc }}""")',
    CALLABLE_TEMPLATE: '''{{ identifier }} = _rt.as_callable(''' + _FETCH + ''')
_rt.attach_metadata({{ identifier }}, doc="""{{ doc }}""", arglists={{ arglist | pyrepr }})''',
    GENERIC_TEMPLATE: '{{ identifier }} = _rt.as_object(' + _FETCH + ', doc="""{{ doc }}""")',
}

_KIND_TEMPLATES = {
    AttributeKind.LIST: LIST_TEMPLATE,
    AttributeKind.TUPLE: LIST_TEMPLATE,
    AttributeKind.MAPPING: MAPPING_TEMPLATE,
    AttributeKind.CALLABLE: CALLABLE_TEMPLATE,
    AttributeKind.GENERIC: GENERIC_TEMPLATE,
}


def python_literal(value: Any) -> str:
    """Render a scalar value as Python source."""
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, str):
        return '"""' + escape_quotes(value) + '"""'
    return repr(value)


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory whose templates override the built-ins
        """
        self.template_dir = Path(template_dir) if template_dir else None
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        builtin_loader = DictLoader(dict(BUILTIN_TEMPLATES))
        if self.template_dir and self.template_dir.exists():
            loader = ChoiceLoader(
                [FileSystemLoader(str(self.template_dir)), builtin_loader]
            )
        else:
            loader = builtin_loader

        self._env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            lstrip_blocks=True,
        )

        self._env.filters["escape_quotes"] = escape_quotes
        self._env.filters["pyrepr"] = repr
        self._env.filters["literal"] = python_literal

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of a built-in or directory template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    return TemplateEngine(template_dir)


def select_template(descriptor: AttributeDescriptor) -> str:
    """
    Choose the declaration template for one descriptor.

    Literal values without a collection kind are inlined as constants.
    List, tuple and mapping kinds win over the callable flag; anything
    left over, including unknown kinds, gets the opaque object form.
    """
    kind = descriptor.kind
    if kind in (None, AttributeKind.SCALAR) and descriptor.has_literal_value:
        return SCALAR_TEMPLATE
    if kind in (AttributeKind.LIST, AttributeKind.TUPLE, AttributeKind.MAPPING):
        return _KIND_TEMPLATES[kind]
    if kind is AttributeKind.CALLABLE or descriptor.is_callable:
        return CALLABLE_TEMPLATE
    return GENERIC_TEMPLATE


def render_declaration(
    engine: TemplateEngine, descriptor: AttributeDescriptor, identifier: str
) -> str:
    """Render the declaration for ``descriptor`` bound to ``identifier``."""
    context = {
        "identifier": identifier,
        "name": descriptor.name,
        "doc": escape_doc(descriptor.doc, NO_DOCUMENTATION),
        "value": descriptor.value,
        "arglist": descriptor.arglist,
    }
    return engine.render_template(select_template(descriptor), context)
