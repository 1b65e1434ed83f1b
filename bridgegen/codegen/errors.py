"""
Exception hierarchy for namespace generation.

Everything except ``LiveAttributeMissing`` is fatal: it aborts the run and
the caller should discard whatever was written to the output path.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class ConfigurationError(GeneratorError):
    """Options are invalid or the module name/path cannot be derived."""

    pass


class OutputError(GeneratorError):
    """Creating directories or writing the output file failed."""

    pass


class MetadataError(GeneratorError):
    """Introspection of the target failed or returned malformed entries."""

    pass


class TemplateError(GeneratorError):
    """A declaration template failed to render."""

    pass


class LiveAttributeMissing(GeneratorError):
    """A descriptor names an attribute that is absent on the live object."""

    def __init__(self, name: str):
        super().__init__(f"Attribute '{name}' is not present on the live object")
        self.name = name
