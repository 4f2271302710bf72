"""HTTP session utilities for install-appimage."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from install_appimage.types import GlobalConfig


@asynccontextmanager
async def create_http_session(
    global_config: GlobalConfig,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create an HTTP session using the configured network timeout.

    Args:
        global_config: Global configuration dictionary

    Yields:
        Configured aiohttp.ClientSession

    """
    timeout_seconds = global_config["network"]["timeout_seconds"]
    timeout = aiohttp.ClientTimeout(
        total=timeout_seconds * 6,
        sock_read=timeout_seconds * 3,
        sock_connect=timeout_seconds,
    )

    async with aiohttp.ClientSession(timeout=timeout) as session:
        yield session
