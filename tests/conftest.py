import os
import sys
import asyncio
import inspect

import pytest

# Ensure project root is on sys.path so `import hanztravel` works in tests
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from hanztravel.catalog.lookup import Catalog  # noqa: E402
from hanztravel.obs.metrics import reset_metrics  # noqa: E402


def pytest_pyfunc_call(pyfuncitem):
    """Allow running async tests without pytest-asyncio.

    If the test function is a coroutine, run it in a fresh event loop.
    """
    testfunction = pyfuncitem.obj
    if inspect.iscoroutinefunction(testfunction):
        funcargs = pyfuncitem.funcargs
        sig = inspect.signature(testfunction)
        allowed = {name: funcargs[name] for name in sig.parameters.keys() if name in funcargs}
        asyncio.run(testfunction(**allowed))
        return True
    return None


@pytest.fixture
def catalog():
    return Catalog.default()


@pytest.fixture(autouse=True)
def _fresh_metrics():
    reset_metrics()
    yield
