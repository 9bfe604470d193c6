"""Example service for rpcgate.

Run with:  rpcgate serve ./examples/service --version 2.0
"""

from __future__ import annotations

import asyncio

from loguru import logger

from rpcgate.utils.exceptions import InvalidParamsError

__all__ = ["echo", "add", "divide", "sqrt", "delayed_echo", "notify"]


def echo(text):
    """Return the argument unchanged."""
    return text


def add(a, b):
    return a + b


def divide(a, b):
    """Raises ZeroDivisionError when b is 0."""
    return a / b


def sqrt(x):
    if not isinstance(x, (int, float)) or x < 0:
        raise InvalidParamsError(data={"x": "expected a non-negative number"})
    return x ** 0.5


async def delayed_echo(text, delay):
    """Deferred result: settles after `delay` seconds."""
    await asyncio.sleep(float(delay or 0))
    return text


def notify(message):
    logger.info("notify: {}", message)
    return True
