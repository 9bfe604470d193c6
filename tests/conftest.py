"""Pytest hooks and fixtures."""

import asyncio

import pytest

from rpcgate.api.rpc.engine import RpcEngine
from rpcgate.service.registry import ServiceMethod, ServiceRegistry


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line("markers", "slow: exercises deferred results with real sleeps")


def _echo(text):
    return text


def _add(a, b):
    return a + b


def _boom(x):
    raise RuntimeError(f"boom: {x}")


async def _async_add(a, b):
    await asyncio.sleep(0)
    return a + b


async def _async_fail(reason):
    await asyncio.sleep(0)
    raise ValueError(reason)


def _zero():
    return 0


@pytest.fixture
def registry() -> ServiceRegistry:
    return ServiceRegistry([
        ServiceMethod.from_callable("echo", _echo),
        ServiceMethod.from_callable("add", _add),
        ServiceMethod.from_callable("boom", _boom),
        ServiceMethod.from_callable("async_add", _async_add),
        ServiceMethod.from_callable("async_fail", _async_fail),
        ServiceMethod.from_callable("zero", _zero),
    ])


@pytest.fixture
def make_engine(registry):
    def _make(version: str = "2.0", **kwargs) -> RpcEngine:
        return RpcEngine(registry, version=version, **kwargs)

    return _make
