"""List command coordinator."""

from argparse import Namespace

from install_appimage.core.listing import ListService
from install_appimage.logger import get_logger
from install_appimage.ui.display import display_listing

from .base import BaseCommandHandler

logger = get_logger(__name__)


class ListHandler(BaseCommandHandler):
    """Thin coordinator for the list command."""

    async def execute(self, args: Namespace) -> None:
        """Execute the list command."""
        listings = ListService(self.paths).list_installed(
            details=args.details
        )
        logger.debug("Listing %d installed AppImages", len(listings))
        display_listing(listings, details=args.details)
