"""Install command coordinator."""

from argparse import Namespace
from contextlib import AsyncExitStack

from install_appimage.core.http_session import create_http_session
from install_appimage.core.icon import IconDownloader
from install_appimage.core.install import InstallService
from install_appimage.exceptions import ValidationError
from install_appimage.logger import get_logger
from install_appimage.ui.display import display_install_result

from .base import BaseCommandHandler

logger = get_logger(__name__)


class InstallHandler(BaseCommandHandler):
    """Thin coordinator for the install command."""

    async def execute(self, args: Namespace) -> None:
        """Execute the install command."""
        if not args.path:
            msg = "Please provide the path to the AppImage file."
            raise ValidationError(msg)

        logger.debug("Install requested for %s", args.path)

        async with AsyncExitStack() as stack:
            icon_downloader = None
            if args.icon:
                # Only open an HTTP session when there is an icon to fetch
                session = await stack.enter_async_context(
                    create_http_session(self.global_config)
                )
                icon_downloader = IconDownloader(session)

            service = InstallService(
                self.paths, self.executor, icon_downloader
            )
            result = await service.install(
                args.path, icon_url=args.icon, params=args.params
            )

        display_install_result(result)
