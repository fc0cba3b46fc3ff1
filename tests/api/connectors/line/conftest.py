"""Fixtures do conector LINE: client real sobre httpx.MockTransport."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from config.settings import LineSettings
from tests.fakes.fake_line_http import LineClientFactory


@pytest.fixture
def line_settings() -> LineSettings:
    return LineSettings(channel_access_token="test-token")


@pytest_asyncio.fixture
async def make_client(line_settings: LineSettings) -> AsyncIterator[LineClientFactory]:
    """Cria (client, recorder) com o handler informado; fecha os pools no teardown."""
    factory = LineClientFactory(line_settings)
    yield factory
    await factory.aclose()
