"""Service registry and service module loading."""

from rpcgate.service.loader import load_service_registry
from rpcgate.service.registry import ServiceMethod, ServiceRegistry, declared_parameter_names

__all__ = ["ServiceMethod", "ServiceRegistry", "declared_parameter_names", "load_service_registry"]
