"""Service module loading from file paths and dotted names."""

import textwrap

import pytest

from rpcgate.service.loader import import_service_module, load_service_registry, registry_from_module
from rpcgate.utils.exceptions import ServiceLoadError


def _write(tmp_path, name, source):
    path = tmp_path / f"{name}.py"
    path.write_text(textwrap.dedent(source))
    return path


def test_loads_public_functions_from_path(tmp_path):
    path = _write(tmp_path, "calc", """
        import json

        def add(a, b):
            return a + b

        def _hidden():
            pass

        class NotExposed:
            pass

        LIMIT = 3
    """)
    registry = load_service_registry(str(path))
    assert registry.list_methods() == ["add"]
    assert registry["add"].parameter_names == ("a", "b")


def test_path_without_suffix(tmp_path):
    _write(tmp_path, "svc", "def ping():\n    return 'pong'\n")
    registry = load_service_registry(str(tmp_path / "svc"))
    assert registry["ping"].handler() == "pong"


def test_all_limits_exports(tmp_path):
    path = _write(tmp_path, "exported", """
        __all__ = ["one", "Klass"]

        def one(x):
            return x

        def two(x):
            return x

        class Klass:
            pass
    """)
    registry = load_service_registry(str(path))
    assert registry.list_methods() == ["one"]


def test_dotted_module_name():
    registry = registry_from_module(import_service_module("rpcgate.service.registry"))
    assert "declared_parameter_names" in registry


@pytest.mark.parametrize("target", ["", "./does/not/exist", "no_such_module_for_rpcgate"])
def test_unloadable_targets(target):
    with pytest.raises(ServiceLoadError):
        load_service_registry(target)


def test_module_that_fails_on_import(tmp_path):
    path = _write(tmp_path, "broken", "raise RuntimeError('bad import')\n")
    with pytest.raises(ServiceLoadError, match="RuntimeError"):
        import_service_module(str(path))


def test_module_without_methods(tmp_path):
    path = _write(tmp_path, "empty", "VALUE = 1\n")
    with pytest.raises(ServiceLoadError, match="no callable methods"):
        load_service_registry(str(path))


@pytest.mark.parametrize(
    "source",
    [
        "from builtins import max as biggest\n__all__ = ['biggest']\n",
        textwrap.dedent("""
            class _Opaque:
                __signature__ = "not a signature"

                def __call__(self):
                    return 1

            opaque = _Opaque()
            __all__ = ["opaque"]
        """),
    ],
)
def test_export_without_signature_is_a_load_error(tmp_path, source):
    path = _write(tmp_path, "nosig", source)
    with pytest.raises(ServiceLoadError, match="cannot introspect export"):
        load_service_registry(str(path))
