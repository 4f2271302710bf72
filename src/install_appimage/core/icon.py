"""Icon download for installed AppImages.

Icons are fetched into a caller-provided (unprivileged) location; moving
them into the AppImage directory is left to the privileged executor.
"""

import contextlib
from pathlib import Path

import aiofiles
import aiohttp

from install_appimage.exceptions import IconDownloadError
from install_appimage.logger import get_logger

logger = get_logger(__name__)

CHUNK_SIZE = 8192


class IconDownloader:
    """Downloads icon images over HTTP."""

    def __init__(self, session: aiohttp.ClientSession) -> None:
        """Initialize with an open aiohttp session."""
        self.session = session

    async def download(self, url: str, dest: Path) -> Path:
        """Download ``url`` to ``dest``.

        Args:
            url: Icon URL supplied by the user
            dest: Destination file path

        Returns:
            The destination path

        Raises:
            IconDownloadError: If the request fails or the file cannot
                be written. Partial files are removed.

        """
        logger.debug("Downloading icon %s -> %s", url, dest)
        try:
            async with self.session.get(url) as response:
                response.raise_for_status()
                dest.parent.mkdir(parents=True, exist_ok=True)
                async with aiofiles.open(dest, mode="wb") as f:
                    async for chunk in response.content.iter_chunked(
                        CHUNK_SIZE
                    ):
                        if chunk:
                            await f.write(chunk)
        except (aiohttp.ClientError, TimeoutError, OSError) as e:
            with contextlib.suppress(OSError):
                dest.unlink(missing_ok=True)
            raise IconDownloadError(str(e) or type(e).__name__, url) from e

        logger.debug("Icon downloaded: %s", dest)
        return dest
