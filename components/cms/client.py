"""
Thin client for the Cosmic headless CMS REST API.

Only the two read operations the site needs are implemented: ``find`` for a
collection of objects of one type and ``find_one`` for a single object by slug.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import requests

from .errors import CMSFetchError, CMSNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_PROPS = ("id", "title", "slug", "type", "metadata")


class CosmicClient:
    """Read-only access to one Cosmic bucket."""

    def __init__(self, bucket_slug: str, read_key: str,
                 api_url: str = "https://api.cosmicjs.com/v3",
                 timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.bucket_slug = bucket_slug
        self.read_key = read_key
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def objects_url(self) -> str:
        return f"{self.api_url}/buckets/{self.bucket_slug}/objects"

    def find(self, object_type: str, query: Optional[Dict[str, Any]] = None,
             props: Optional[Sequence[str]] = DEFAULT_PROPS,
             depth: int = 1, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Fetch all objects of a type, optionally filtered by extra query fields.

        Args:
            object_type: Cosmic object type slug (e.g. 'youth-houses')
            query: Additional query fields (e.g. {'metadata.featured_homepage': True})
            props: Object properties to return
            depth: Depth of nested object resolution
            limit: Maximum number of objects

        Returns:
            List of raw object dictionaries

        Raises:
            CMSNotFoundError: If no objects match
            CMSFetchError: On any other transport or backend failure
        """
        full_query = {"type": object_type}
        if query:
            full_query.update(query)

        params = {
            "read_key": self.read_key,
            "query": json.dumps(full_query),
            "depth": depth,
        }
        if props:
            params["props"] = ",".join(props)
        if limit is not None:
            params["limit"] = limit

        payload = self._get(self.objects_url, params)
        return payload.get("objects") or []

    def find_one(self, object_type: str, slug: Optional[str] = None,
                 props: Optional[Sequence[str]] = None,
                 depth: int = 1) -> Optional[Dict[str, Any]]:
        """
        Fetch a single object of a type, by slug when given.

        Returns:
            Raw object dictionary, or None when the response holds no object

        Raises:
            CMSNotFoundError: If no object matches
            CMSFetchError: On any other transport or backend failure
        """
        query = {"slug": slug} if slug else None
        objects = self.find(object_type, query=query, props=props, depth=depth, limit=1)
        return objects[0] if objects else None

    def _get(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise CMSFetchError(f"Request to {url} failed: {e}") from e

        if response.status_code == 404:
            raise CMSNotFoundError("No objects found", status=404)

        if not response.ok:
            raise CMSFetchError(
                f"Cosmic returned HTTP {response.status_code}",
                status=response.status_code
            )

        try:
            return response.json()
        except ValueError as e:
            raise CMSFetchError(f"Invalid JSON in Cosmic response: {e}",
                                status=response.status_code) from e
