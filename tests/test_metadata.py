import types

from bridgegen.codegen.descriptor import AttributeDescriptor, AttributeKind
from bridgegen.codegen.templates import (
    CALLABLE_TEMPLATE,
    GENERIC_TEMPLATE,
    LIST_TEMPLATE,
    MAPPING_TEMPLATE,
    SCALAR_TEMPLATE,
    select_template,
)
from bridgegen.metadata import InspectMetadataSource, describe_value, format_arglist


def sample(a, /, b, *, c=1, **rest):
    """Sample function."""


def varargs(*args, key=None):
    pass


def test_format_arglist_keeps_parameter_markers():
    assert format_arglist(sample) == ("a", "/", "b", "*", "c=1", "**rest")
    assert format_arglist(varargs) == ("*args", "key=None")


def test_format_arglist_unavailable_signature():
    assert format_arglist(42) is None


def test_describe_literals():
    assert describe_value(3.14) == {"type": "scalar", "value": 3.14, "doc": None}
    assert describe_value("x")["value"] == "x"


def test_describe_collections_and_callables():
    assert describe_value([1])["type"] == "list"
    assert describe_value((1,))["type"] == "tuple"
    assert describe_value({})["type"] == "dict"

    described = describe_value(sample)
    assert described["flags"] == {"callable": True}
    assert described["doc"] == "Sample function."
    assert described["arglists"] == ("a", "/", "b", "*", "c=1", "**rest")


def test_described_values_dispatch_to_expected_templates():
    cases = {
        3.14: SCALAR_TEMPLATE,
        "text": SCALAR_TEMPLATE,
        float("inf"): GENERIC_TEMPLATE,
        None: GENERIC_TEMPLATE,
    }
    for value, template in cases.items():
        descriptor = AttributeDescriptor.from_raw("x", describe_value(value))
        assert select_template(descriptor) == template

    for value, template in [
        ([1], LIST_TEMPLATE),
        ((1,), LIST_TEMPLATE),
        ({"a": 1}, MAPPING_TEMPLATE),
        (sample, CALLABLE_TEMPLATE),
        (object(), GENERIC_TEMPLATE),
    ]:
        descriptor = AttributeDescriptor.from_raw("x", describe_value(value))
        assert select_template(descriptor) == template

    assert (
        AttributeDescriptor.from_raw("x", describe_value({"a": 1})).kind
        is AttributeKind.MAPPING
    )


def test_inspect_source_skips_private_names():
    module = types.ModuleType("fake", "Fake module doc")
    module.public = [1]
    module._private = 2

    metadata = InspectMetadataSource().describe(module)
    assert metadata.doc == "Fake module doc"
    assert "public" in metadata.attributes
    assert "_private" not in metadata.attributes

    everything = InspectMetadataSource(include_private=True).describe(module)
    assert "_private" in everything.attributes
    assert "__name__" in everything.attributes


def test_inspect_source_without_docstring():
    module = types.ModuleType("fake")
    assert InspectMetadataSource().describe(module).doc is None
