"""
Page metadata (title, description, keywords) for each view of the site.
"""

from dataclasses import dataclass
from typing import Optional

from components.cms.models import LocationRecord, PageRecord, SiteConfigRecord
from components.maps.markers import strip_tags

SITE_NAME = "Entree Brussels"
DEFAULT_SITE_TITLE = "Entree Brussels - Youth Houses Network"
DEFAULT_SITE_DESCRIPTION = ("Discover and connect with youth houses across Brussels. "
                            "Find activities, events, and communities near you.")
DESCRIPTION_LENGTH = 160


@dataclass(frozen=True)
class PageMetadata:
    title: str
    description: str
    keywords: str = ""


def site_metadata(site_settings: Optional[SiteConfigRecord]) -> PageMetadata:
    """Metadata for the site as a whole (home page)."""
    title = DEFAULT_SITE_TITLE
    description = DEFAULT_SITE_DESCRIPTION
    if site_settings is not None:
        title = site_settings.site_title or title
        description = site_settings.site_description or description
    return PageMetadata(
        title=title,
        description=description,
        keywords="Brussels, youth houses, community, activities, young people, Entree"
    )


def projects_metadata() -> PageMetadata:
    return PageMetadata(
        title=f"Projects | {SITE_NAME} - Youth Houses Network",
        description=("Explore community projects happening across Brussels youth houses. "
                     "Join initiatives that bring young people together."),
        keywords="Brussels projects, youth projects, community initiatives, youth houses, collaboration"
    )


def youth_house_metadata(house: Optional[LocationRecord]) -> PageMetadata:
    """Metadata for a youth house detail page; `house` is None when not found."""
    if house is None:
        return PageMetadata(
            title="Youth House Not Found",
            description="The requested youth house could not be found."
        )

    name = house.display_name
    if house.description:
        description = strip_tags(house.description)[:DESCRIPTION_LENGTH]
    else:
        description = f"Discover {name}, a youth house in {house.neighborhood or 'Brussels'}."

    return PageMetadata(
        title=f"{name} | {SITE_NAME}",
        description=description,
        keywords=f"youth house, Brussels, {house.neighborhood or ''}, community, activities, {name}"
    )


def content_page_metadata(page: Optional[PageRecord]) -> PageMetadata:
    """Metadata for a CMS content page; `page` is None when not found."""
    if page is None:
        return PageMetadata(
            title="Page Not Found",
            description="The requested page could not be found."
        )

    title = page.title
    return PageMetadata(
        title=f"{title} | {SITE_NAME}",
        description=page.seo_description or f"Learn more about {title} - {SITE_NAME} youth houses network.",
        keywords=f"{SITE_NAME}, youth houses, Brussels, {title}"
    )


def contact_metadata() -> PageMetadata:
    return PageMetadata(
        title=f"Contact | {SITE_NAME}",
        description="Get in touch with the Entree Brussels youth houses network."
    )
