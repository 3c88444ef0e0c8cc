"""
CMS component - typed read access to the Cosmic bucket backing the site.
"""

from .client import CosmicClient
from .errors import CMSError, CMSFetchError, CMSNotFoundError
from .models import LocationRecord, PageRecord, ProjectRecord, SiteConfigRecord, parse_record
from .queries import (
    get_featured_projects,
    get_page_by_slug,
    get_pages,
    get_project_by_slug,
    get_projects,
    get_site_settings,
    get_youth_house_by_slug,
    get_youth_houses,
)

__all__ = [
    'CosmicClient',
    'CMSError',
    'CMSFetchError',
    'CMSNotFoundError',
    'LocationRecord',
    'PageRecord',
    'ProjectRecord',
    'SiteConfigRecord',
    'parse_record',
    'get_featured_projects',
    'get_page_by_slug',
    'get_pages',
    'get_project_by_slug',
    'get_projects',
    'get_site_settings',
    'get_youth_house_by_slug',
    'get_youth_houses',
]
