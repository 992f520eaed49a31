import io
from unittest.mock import AsyncMock, MagicMock

import pytest
from rich.console import Console

from domain_checker.resolver import ResolverClient


def _capture_console() -> tuple[Console, io.StringIO]:
    """Create a Console that writes to a StringIO for test capturing."""
    buf = io.StringIO()
    return Console(file=buf, force_terminal=True, width=120), buf


@pytest.fixture
def client():
    """Create a mock resolver client with both lookups stubbed."""
    c = MagicMock(spec=ResolverClient)
    c.lookup_nameservers = AsyncMock()
    c.lookup_addresses = AsyncMock()
    return c
