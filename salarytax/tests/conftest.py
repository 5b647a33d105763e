"""
Test configuration for SalaryTax tests.

The project root is put on sys.path so 'from salarytax...' resolves whether or
not the package is installed, and whether pytest runs from the project root or
from salarytax/.
"""
import sys
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

_project_root = Path(__file__).parent.parent.parent    # .../package/

if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


@pytest_asyncio.fixture
async def client():
    """Async httpx client using ASGI transport - no live server needed."""
    from salarytax.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
