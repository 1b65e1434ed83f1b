from pathlib import Path

import pytest

from bridgegen.codegen.config import NamespaceOptions
from bridgegen.codegen.errors import ConfigurationError, OutputError
from bridgegen.codegen.planner import (
    path_for_symbol,
    plan_generation,
    prepare_output,
)


def test_default_plan_for_simple_target():
    plan = plan_generation("numpy", NamespaceOptions())
    assert plan.module_symbol == "python.numpy"
    assert plan.target_path == Path("src", "python", "numpy.py")
    assert plan.module_doc is None


def test_dashes_translated_only_in_path():
    plan = plan_generation("my-mod", NamespaceOptions())
    assert plan.module_symbol == "python.my-mod"
    assert plan.target_path == Path("src", "python", "my_mod.py")


def test_dotted_target_becomes_nested_path():
    plan = plan_generation("os.path", NamespaceOptions(output_dir="gen"))
    assert plan.target_path == Path("gen", "python", "os", "path.py")


def test_ns_symbol_and_prefix_overrides():
    plan = plan_generation("numpy", NamespaceOptions(ns_symbol="np.core-api"))
    assert plan.module_symbol == "np.core-api"
    assert plan.target_path == Path("src", "np", "core_api.py")

    plan = plan_generation("numpy", NamespaceOptions(ns_prefix="py"))
    assert plan.module_symbol == "py.numpy"


def test_output_fname_overrides_derived_path():
    plan = plan_generation("numpy", NamespaceOptions(output_fname="out/np.py"))
    assert plan.target_path == Path("out/np.py")
    assert plan.module_symbol == "python.numpy"


def test_with_doc_returns_new_plan():
    plan = plan_generation("numpy", NamespaceOptions())
    documented = plan.with_doc("Numerical Python")
    assert documented.module_doc == "Numerical Python"
    assert plan.module_doc is None


@pytest.mark.parametrize(
    "target, options",
    [
        ("", NamespaceOptions()),
        ("   ", NamespaceOptions()),
        (None, NamespaceOptions()),
        ("numpy", NamespaceOptions(ns_prefix="")),
        ("numpy", NamespaceOptions(ns_symbol="a..b")),
        ("numpy.", NamespaceOptions()),
    ],
)
def test_unresolvable_plans_raise_configuration_error(target, options):
    with pytest.raises(ConfigurationError):
        plan_generation(target, options)


def test_path_for_symbol():
    assert path_for_symbol("a.b-c.d", "root") == Path("root", "a", "b_c", "d.py")


def test_prepare_output_creates_parent_directories(tmp_path):
    plan = plan_generation("pkg.mod", NamespaceOptions(output_dir=str(tmp_path / "src")))
    path = prepare_output(plan)
    assert path.parent.is_dir()
    assert not path.exists()


def test_prepare_output_fails_when_parent_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    plan = plan_generation("numpy", NamespaceOptions(output_dir=str(blocker)))
    with pytest.raises(OutputError):
        prepare_output(plan)


def test_prepare_output_fails_when_target_is_a_directory(tmp_path):
    (tmp_path / "python" / "numpy.py").mkdir(parents=True)
    plan = plan_generation("numpy", NamespaceOptions(output_dir=str(tmp_path)))
    with pytest.raises(OutputError):
        prepare_output(plan)
