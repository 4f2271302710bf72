"""Core services for installing, listing and removing AppImages."""
