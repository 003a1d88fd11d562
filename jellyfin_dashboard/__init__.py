"""Jellyfin "recently added" dashboard: JSON API and carousel page."""

__version__ = "1.0.0"
