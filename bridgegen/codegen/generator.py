"""
Namespace emitter.

Writes one Python module exposing the attributes of a live foreign object
as module-level declarations. The run is all-or-nothing: any fatal error
propagates and the caller should discard the output file.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..logging_config import get_logger
from .config import NamespaceOptions, coerce_options
from .descriptor import AttributeDescriptor, is_descriptor_entry, iter_table
from .errors import GeneratorError, LiveAttributeMissing, MetadataError, OutputError
from .escaping import NO_MODULE_DOCUMENTATION, escape_doc
from .naming import host_identifier
from .planner import GenerationPlan, plan_generation, prepare_output
from .templates import (
    HEADER_TEMPLATE,
    ROOT_HANDLE_TEMPLATE,
    TemplateEngine,
    create_template_engine,
    render_declaration,
)

logger = get_logger(__name__)

DECLARATION_SEPARATOR = "\n\n"


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        path: Path,
        module_symbol: str,
        emitted: Tuple[str, ...] = (),
        skipped: Tuple[str, ...] = (),
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            path: File that was written
            module_symbol: Namespace symbol declared in the file
            emitted: Host identifiers declared, in output order
            skipped: Foreign names that produced no declaration
            metadata: Additional metadata about generation
        """
        self.path = path
        self.module_symbol = module_symbol
        self.emitted = tuple(emitted)
        self.skipped = tuple(skipped)
        self.metadata = metadata or {}
        self.success = True

    def __repr__(self) -> str:
        return (
            f"GenerationResult(path={str(self.path)!r}, "
            f"module_symbol={self.module_symbol!r}, emitted={len(self.emitted)}, "
            f"skipped={len(self.skipped)})"
        )


class NamespaceEmitter:
    """Generates a namespace module from a metadata source and a bridge."""

    def __init__(
        self,
        metadata_source=None,
        bridge=None,
        template_engine: Optional[TemplateEngine] = None,
    ):
        """
        Initialize the emitter.

        Args:
            metadata_source: Object with ``describe(live_target)`` returning
                ``doc`` and ``attributes``; defaults to InspectMetadataSource
            bridge: Object with ``resolve``, ``has_attr`` and
                ``execution_context``; defaults to PythonBridge
            template_engine: Engine holding the declaration templates
        """
        if metadata_source is None:
            from ..metadata import InspectMetadataSource

            metadata_source = InspectMetadataSource()
        if bridge is None:
            from ..runtime.bridge import PythonBridge

            bridge = PythonBridge()

        self.metadata_source = metadata_source
        self.bridge = bridge
        self.template_engine = template_engine or create_template_engine()

    def write_namespace(
        self,
        target: str,
        options: Union[NamespaceOptions, Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> GenerationResult:
        """
        Generate the namespace module for ``target``.

        Args:
            target: Target specifier resolved through the bridge
            options: NamespaceOptions or a mapping of option values
            **overrides: Individual option overrides

        Returns:
            GenerationResult describing the written file

        Raises:
            ConfigurationError: If the module name or path cannot be derived
            OutputError: If the output cannot be created or written
            MetadataError: If the target cannot be introspected
            TemplateError: If a declaration fails to render
        """
        options = coerce_options(options, **overrides)
        plan = plan_generation(target, options)
        prepare_output(plan)

        with self.bridge.execution_context():
            live_target, metadata = self._describe(target)
            logger.debug("Writing python module %s to file %s", target, plan.target_path)
            plan = plan.with_doc(metadata.doc)
            emitted, skipped = self._write_file(
                plan, target, live_target, metadata.attributes, options
            )

        logger.info(
            "Generated %s at %s (%d declarations, %d skipped)",
            plan.module_symbol,
            plan.target_path,
            len(emitted),
            len(skipped),
        )
        return GenerationResult(
            path=plan.target_path,
            module_symbol=plan.module_symbol,
            emitted=emitted,
            skipped=skipped,
            metadata={"target": target, "declaration_count": len(emitted)},
        )

    def _describe(self, target: str):
        """Resolve the live target and fetch its metadata."""
        try:
            live_target = self.bridge.resolve(target)
        except GeneratorError:
            raise
        except Exception as e:
            raise MetadataError(f"Cannot resolve target '{target}': {e}") from e

        try:
            metadata = self.metadata_source.describe(live_target)
        except GeneratorError:
            raise
        except Exception as e:
            raise MetadataError(f"Introspection of '{target}' failed: {e}") from e

        if not hasattr(metadata, "attributes") or not hasattr(metadata, "doc"):
            raise MetadataError(
                f"Metadata source returned {type(metadata).__name__} for '{target}', "
                "expected an object with 'doc' and 'attributes'"
            )
        return live_target, metadata

    def _confirm_live(self, live_target: Any, name: str):
        try:
            present = self.bridge.has_attr(live_target, name)
        except Exception as e:
            raise MetadataError(f"Presence check for '{name}' failed: {e}") from e
        if not present:
            raise LiveAttributeMissing(name)

    def _render_header(self, plan: GenerationPlan, options: NamespaceOptions) -> str:
        return self.template_engine.render_template(
            HEADER_TEMPLATE,
            {
                "doc": escape_doc(plan.module_doc, NO_MODULE_DOCUMENTATION),
                "namespace": plan.module_symbol,
                "exclude": options.exclude,
            },
        )

    def _write_file(
        self,
        plan: GenerationPlan,
        target: str,
        live_target: Any,
        attributes: Any,
        options: NamespaceOptions,
    ) -> Tuple[List[str], List[str]]:
        emitted: List[str] = []
        skipped: List[str] = []
        entries = iter_table(attributes)

        try:
            with open(plan.target_path, "w", encoding="utf-8", newline="\n") as writer:
                writer.write(self._render_header(plan, options))
                writer.write(DECLARATION_SEPARATOR)
                writer.write(
                    self.template_engine.render_template(
                        ROOT_HANDLE_TEMPLATE, {"target": target}
                    )
                )

                for name, raw in entries:
                    if not is_descriptor_entry(name, raw):
                        logger.debug("Skipping non-descriptor entry %r", name)
                        skipped.append(str(name))
                        continue

                    descriptor = AttributeDescriptor.from_raw(name, raw)
                    try:
                        self._confirm_live(live_target, name)
                    except LiveAttributeMissing as e:
                        logger.debug("Skipping %s: %s", name, e)
                        skipped.append(name)
                        continue

                    identifier = host_identifier(name, options.symbol_name_remaps)
                    writer.write(DECLARATION_SEPARATOR)
                    writer.write(
                        render_declaration(self.template_engine, descriptor, identifier)
                    )
                    emitted.append(identifier)

                writer.write("\n")
        except (OSError, UnicodeError) as e:
            raise OutputError(f"Failed to write {plan.target_path}: {e}") from e

        return emitted, skipped


def generate(
    target: str,
    options: Union[NamespaceOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> GenerationResult:
    """
    Generate a namespace module for ``target`` with the default collaborators.

    Example:
        ``generate("builtins", symbol_name_remaps={"Exception": "PyException"})``
        writes ``src/python/builtins.py``.
    """
    return NamespaceEmitter().write_namespace(target, options, **overrides)
