"""
Exceptions raised by the CMS access layer.
"""

from typing import Optional


class CMSError(Exception):
    """Base class for CMS access errors."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class CMSNotFoundError(CMSError):
    """The bucket has no objects matching the query (HTTP 404)."""


class CMSFetchError(CMSError):
    """Transport or backend failure other than not-found."""
