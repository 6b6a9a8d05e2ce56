"""Shared pytest fixtures for gnomad-mcp test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from gnomad_mcp import gnomad_client


@pytest.fixture
def gnomad_api():
    """Patch the remote client so tests never reach the real gnomAD API.

    The mock returns an empty successful response by default; tests set
    ``return_value`` / ``side_effect`` and inspect ``await_args``.
    """
    with patch.object(
        gnomad_client,
        "execute_query",
        new_callable=AsyncMock,
        return_value=gnomad_client.RemoteQueryResult(data={}),
    ) as mock:
        yield mock
