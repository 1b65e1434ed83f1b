import importlib.util
import sys
import textwrap
from contextlib import contextmanager
from types import SimpleNamespace

import pytest

from bridgegen.codegen import NamespaceEmitter
from bridgegen.metadata import TargetMetadata

SAMPLE_MODULE_NAME = "bridgegen_sample"

SAMPLE_MODULE_SOURCE = textwrap.dedent(
    '''
    """Sample "quoted" module \\\\ with a backslash.

    Second line.
    """

    PI = 3.14
    NAME = 'say "hi" \\\\ there'
    FLAG = True
    ITEMS = [1, 2, 3]
    PAIR = (4, 5)
    TABLE = {"a": 1}


    def add(a, b=2):
        """Add two numbers."""
        return a + b


    class Widget:
        """A widget."""

        def __init__(self, size):
            self.size = size
    '''
)


class FakeBridge:
    """Bridge over a dict of in-memory targets."""

    def __init__(self, targets):
        self.targets = targets
        self.context_entries = 0
        self.context_exits = 0

    def resolve(self, target):
        try:
            return self.targets[target]
        except KeyError:
            raise ImportError(f"No target {target}")

    def has_attr(self, obj, name):
        return hasattr(obj, name)

    @contextmanager
    def execution_context(self):
        self.context_entries += 1
        try:
            yield
        finally:
            self.context_exits += 1


class FakeMetadataSource:
    """Returns a fixed table regardless of the live target."""

    def __init__(self, attributes, doc=None):
        self.attributes = attributes
        self.doc = doc

    def describe(self, target):
        return TargetMetadata(doc=self.doc, attributes=self.attributes)


@pytest.fixture
def make_emitter():
    def factory(attributes, live=None, doc=None, target="demo"):
        live = live if live is not None else SimpleNamespace(
            **{name: object() for name in attributes if isinstance(name, str)}
        )
        bridge = FakeBridge({target: live})
        emitter = NamespaceEmitter(
            metadata_source=FakeMetadataSource(attributes, doc=doc), bridge=bridge
        )
        return emitter, bridge

    return factory


@pytest.fixture
def sample_module(tmp_path, monkeypatch):
    """An importable module on sys.path for end-to-end generation."""
    module_dir = tmp_path / "site"
    module_dir.mkdir()
    (module_dir / f"{SAMPLE_MODULE_NAME}.py").write_text(
        SAMPLE_MODULE_SOURCE, encoding="utf-8"
    )
    monkeypatch.syspath_prepend(str(module_dir))
    monkeypatch.delitem(sys.modules, SAMPLE_MODULE_NAME, raising=False)
    yield SAMPLE_MODULE_NAME
    sys.modules.pop(SAMPLE_MODULE_NAME, None)


def load_generated(path, module_name="generated_namespace"):
    """Import a generated file without putting it on sys.path."""
    spec = importlib.util.spec_from_file_location(module_name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(name="load_generated")
def load_generated_fixture():
    return load_generated
