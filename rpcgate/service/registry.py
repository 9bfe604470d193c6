"""Read-only registry of service methods exposed over JSON-RPC."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterable, Iterator, Mapping

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def declared_parameter_names(func: Callable[..., Any]) -> tuple[str, ...]:
    """Ordered names of the formal positional parameters of `func`.

    `*args`, `**kwargs` and keyword-only parameters are not counted; bound
    methods do not report `self`.
    """
    signature = inspect.signature(func)
    return tuple(
        name
        for name, param in signature.parameters.items()
        if param.kind in _POSITIONAL_KINDS
    )


@dataclass(frozen=True, slots=True)
class ServiceMethod:
    """Descriptor of one callable: name, handler and declared parameters."""

    name: str
    handler: Callable[..., Any]
    parameter_names: tuple[str, ...]

    @property
    def arity(self) -> int:
        return len(self.parameter_names)

    @classmethod
    def from_callable(
        cls,
        name: str,
        handler: Callable[..., Any],
        parameter_names: Iterable[str] | None = None,
    ) -> "ServiceMethod":
        """Describe `handler`; introspect its signature unless names are given."""
        if not isinstance(name, str) or not name:
            raise ValueError("method name must be a non-empty string")
        if not callable(handler):
            raise TypeError(f"handler for {name!r} must be callable")
        names = tuple(parameter_names) if parameter_names is not None else declared_parameter_names(handler)
        return cls(name=name, handler=handler, parameter_names=names)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "arity": self.arity, "parameters": list(self.parameter_names)}


class ServiceRegistry(Mapping[str, ServiceMethod]):
    """Immutable name -> ServiceMethod mapping shared by every dispatch."""

    def __init__(self, methods: Iterable[ServiceMethod] = ()) -> None:
        table: dict[str, ServiceMethod] = {}
        for method in methods:
            if method.name in table:
                raise ValueError(f"duplicate method: {method.name}")
            table[method.name] = method
        self._methods = MappingProxyType(table)

    @classmethod
    def from_callables(cls, callables: Mapping[str, Callable[..., Any]]) -> "ServiceRegistry":
        """Build a registry from a name -> callable mapping using introspection."""
        return cls(ServiceMethod.from_callable(name, fn) for name, fn in callables.items())

    def __getitem__(self, name: str) -> ServiceMethod:
        return self._methods[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._methods)

    def __len__(self) -> int:
        return len(self._methods)

    def list_methods(self) -> list[str]:
        """List all registered method names."""
        return sorted(self._methods)

    def describe(self) -> list[dict[str, Any]]:
        return [self._methods[name].to_dict() for name in self.list_methods()]
