import asyncio
import inspect
import logging

import pytest

from pagegen.metadata import build_default_registry


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem):
    """Run async test functions without requiring external plugins."""
    test_function = pyfuncitem.obj
    if inspect.iscoroutinefunction(test_function):
        loop = asyncio.new_event_loop()
        try:
            asyncio.set_event_loop(loop)
            # Filter funcargs to only include parameters the function expects
            sig = inspect.signature(test_function)
            filtered_args = {k: v for k, v in pyfuncitem.funcargs.items() if k in sig.parameters}
            loop.run_until_complete(test_function(**filtered_args))
        finally:
            loop.close()
            asyncio.set_event_loop(None)
        return True
    return None


def pytest_configure(config):
    """Register markers for pytest."""
    config.addinivalue_line("markers", "asyncio: mark async tests")


@pytest.fixture(autouse=True)
def _restore_pagegen_logger():
    """CLI runs attach a handler and stop propagation; undo that so caplog works."""
    pagegen_logger = logging.getLogger("pagegen")
    handlers = list(pagegen_logger.handlers)
    level = pagegen_logger.level
    propagate = pagegen_logger.propagate
    yield
    pagegen_logger.handlers[:] = handlers
    pagegen_logger.setLevel(level)
    pagegen_logger.propagate = propagate


@pytest.fixture
def registry():
    return build_default_registry()
