"""Load a service module and expose its public functions as a registry."""

from __future__ import annotations

import importlib
import importlib.util
import inspect
import sys
from pathlib import Path
from types import ModuleType

from loguru import logger

from rpcgate.service.registry import ServiceMethod, ServiceRegistry
from rpcgate.utils.exceptions import ServiceLoadError


def _looks_like_path(target: str) -> bool:
    return target.startswith(".") or target.endswith(".py") or "/" in target or "\\" in target


def import_service_module(target: str) -> ModuleType:
    """Import `target` as a file path (./service, service.py) or dotted module name."""
    target = (target or "").strip()
    if not target:
        raise ServiceLoadError(target, "no service module given")

    if not _looks_like_path(target):
        try:
            return importlib.import_module(target)
        except ImportError as e:
            raise ServiceLoadError(target, str(e)) from e

    path = Path(target).expanduser()
    if path.suffix != ".py":
        path = path.with_suffix(".py")
    path = path.resolve()
    if not path.is_file():
        raise ServiceLoadError(target, f"file not found: {path}")

    module_name = f"rpcgate_service_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ServiceLoadError(target, f"not an importable module: {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise ServiceLoadError(target, f"{type(e).__name__}: {e}") from e
    return module


def _exported_names(module: ModuleType) -> list[str]:
    exported = getattr(module, "__all__", None)
    if exported is not None:
        return [str(name) for name in exported]
    return [
        name
        for name, obj in vars(module).items()
        if not name.startswith("_")
        and inspect.isfunction(obj)
        and obj.__module__ == module.__name__
    ]


def registry_from_module(module: ModuleType) -> ServiceRegistry:
    """Build a registry from the module's exported callables."""
    methods = []
    for name in _exported_names(module):
        obj = getattr(module, name, None)
        if not callable(obj) or inspect.isclass(obj):
            logger.debug("Skipping non-function export {} in {}", name, module.__name__)
            continue
        try:
            methods.append(ServiceMethod.from_callable(name, obj))
        except (ValueError, TypeError) as e:
            raise ServiceLoadError(module.__name__, f"cannot introspect export {name!r}: {e}") from e
    return ServiceRegistry(methods)


def load_service_registry(target: str) -> ServiceRegistry:
    """Import the service module named by `target` and describe its methods."""
    module = import_service_module(target)
    registry = registry_from_module(module)
    if not registry:
        raise ServiceLoadError(target, "module exports no callable methods")
    logger.info("Loaded service {} with {} methods: {}", target, len(registry), registry.list_methods())
    return registry
