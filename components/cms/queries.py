"""
CMS queries used by the site pages.

Each query returns typed records. A Cosmic "no objects found" answer is a normal
outcome (empty list or None); every other failure is logged and raised as
CMSFetchError for the page layer to turn into an error panel.
"""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import ValidationError

from components.settings import load_settings

from .client import CosmicClient
from .errors import CMSError, CMSFetchError, CMSNotFoundError
from .models import LocationRecord, PageRecord, ProjectRecord, SiteConfigRecord, parse_record

logger = logging.getLogger(__name__)

R = TypeVar("R")

YOUTH_HOUSES = "youth-houses"
PROJECTS = "projects"
PAGES = "pages"
SITE_SETTINGS = "site-settings"

_client: Optional[CosmicClient] = None


def get_client() -> CosmicClient:
    """Get the shared Cosmic client built from environment settings."""
    global _client
    if _client is None:
        settings = load_settings()
        _client = CosmicClient(
            bucket_slug=settings.cosmic_bucket_slug or "",
            read_key=settings.cosmic_read_key or "",
            api_url=settings.cosmic_api_url,
            timeout=settings.cosmic_timeout,
        )
    return _client


def set_client(client: Optional[CosmicClient]) -> None:
    """Replace the shared client (None resets to environment settings)."""
    global _client
    _client = client


def _parse(raw: Dict[str, Any], object_type: str, expected: Type[R]) -> R:
    # The queried type is authoritative; props may omit it.
    record = parse_record({**raw, "type": object_type})
    if not isinstance(record, expected):
        raise CMSFetchError(f"Expected {expected.__name__} for {object_type}, got {type(record).__name__}")
    return record


def _parse_many(objects: List[Dict[str, Any]], object_type: str, expected: Type[R]) -> List[R]:
    records = []
    for raw in objects:
        try:
            records.append(_parse(raw, object_type, expected))
        except ValidationError as e:
            logger.warning(f"Skipping invalid {object_type} object {raw.get('slug', raw.get('id'))}: {e}")
    return records


def _find(object_type: str, expected: Type[R], label: str,
          query: Optional[Dict[str, Any]] = None,
          client: Optional[CosmicClient] = None) -> List[R]:
    client = client or get_client()
    try:
        objects = client.find(object_type, query=query)
    except CMSNotFoundError:
        return []
    except CMSError as e:
        logger.error(f"Error fetching {label}: {e}")
        raise CMSFetchError(f"Failed to fetch {label}", status=e.status) from e

    return _parse_many(objects, object_type, expected)


def _find_one(object_type: str, expected: Type[R], label: str,
              slug: Optional[str] = None,
              client: Optional[CosmicClient] = None) -> Optional[R]:
    client = client or get_client()
    try:
        raw = client.find_one(object_type, slug=slug)
    except CMSNotFoundError:
        return None
    except CMSError as e:
        logger.error(f"Error fetching {label}: {e}")
        raise CMSFetchError(f"Failed to fetch {label}", status=e.status) from e

    if raw is None:
        return None

    try:
        return _parse(raw, object_type, expected)
    except ValidationError as e:
        logger.error(f"Invalid {label} object {slug}: {e}")
        raise CMSFetchError(f"Failed to fetch {label}") from e


def get_youth_houses(client: Optional[CosmicClient] = None) -> List[LocationRecord]:
    return _find(YOUTH_HOUSES, LocationRecord, "youth houses", client=client)


def get_youth_house_by_slug(slug: str, client: Optional[CosmicClient] = None) -> Optional[LocationRecord]:
    return _find_one(YOUTH_HOUSES, LocationRecord, "youth house", slug=slug, client=client)


def get_projects(client: Optional[CosmicClient] = None) -> List[ProjectRecord]:
    return _find(PROJECTS, ProjectRecord, "projects", client=client)


def get_project_by_slug(slug: str, client: Optional[CosmicClient] = None) -> Optional[ProjectRecord]:
    return _find_one(PROJECTS, ProjectRecord, "project", slug=slug, client=client)


def get_featured_projects(client: Optional[CosmicClient] = None) -> List[ProjectRecord]:
    return _find(PROJECTS, ProjectRecord, "featured projects",
                 query={"metadata.featured_homepage": True}, client=client)


def get_pages(client: Optional[CosmicClient] = None) -> List[PageRecord]:
    return _find(PAGES, PageRecord, "pages", client=client)


def get_page_by_slug(slug: str, client: Optional[CosmicClient] = None) -> Optional[PageRecord]:
    return _find_one(PAGES, PageRecord, "page", slug=slug, client=client)


def get_site_settings(client: Optional[CosmicClient] = None) -> Optional[SiteConfigRecord]:
    return _find_one(SITE_SETTINGS, SiteConfigRecord, "site settings", client=client)
