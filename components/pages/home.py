"""
Home page: hero, youth houses map, featured projects and contact section.
"""

import html
import logging
from typing import List, Optional

import streamlit as st

from components.cms import queries
from components.cms.errors import CMSFetchError
from components.cms.models import LocationRecord, ProjectRecord, SiteConfigRecord
from components.maps import render_interactive_map
from utils.icons import PRIMARY_COLOR

from .cards import project_card_html
from .contact import render_contact_section
from .metadata import site_metadata
from .view import PageView, render_error_panel

logger = logging.getLogger(__name__)

DEFAULT_HERO_TITLE = "Discover Youth Houses in Brussels"
DEFAULT_HERO_SUBTITLE = ("Connect with vibrant communities, explore activities, "
                         "and find your place in Brussels' youth network.")


def render_hero(site_settings: Optional[SiteConfigRecord], house_count: int = 0) -> None:
    title = DEFAULT_HERO_TITLE
    subtitle = DEFAULT_HERO_SUBTITLE
    colors = {}
    if site_settings is not None:
        title = site_settings.hero_title or title
        subtitle = site_settings.hero_subtitle or subtitle
        colors = site_settings.brand_colors

    start = html.escape(colors.get('primary', PRIMARY_COLOR), quote=True)
    end = html.escape(colors.get('secondary', '#4ECDC4'), quote=True)

    st.markdown(f"""
    <div style="background: linear-gradient(135deg, {start}, {end}); color: white;
                padding: 3rem 2rem; border-radius: 12px; margin-bottom: 2rem; text-align: center;">
        <h1 style="color: white; margin-bottom: 1rem;">{html.escape(title)}</h1>
        <p style="font-size: 1.2rem; margin: 0;">{html.escape(subtitle)}</p>
        <p style="margin: 1rem 0 0 0; opacity: 0.9;">{house_count} youth houses across Brussels</p>
    </div>
    """, unsafe_allow_html=True)


def render_map_section(youth_houses: List[LocationRecord], site_settings: Optional[SiteConfigRecord]) -> None:
    st.header("Explore Youth Houses")
    st.markdown("Find youth houses near you. Click on any marker to learn more about activities and programs.")
    render_interactive_map(youth_houses, site_settings=site_settings)


def render_featured_projects(projects: List[ProjectRecord]) -> None:
    if not projects:
        return

    st.header("Featured Projects")
    st.markdown("Discover exciting initiatives happening across our youth house network.")

    columns = st.columns(3)
    for i, project in enumerate(projects):
        with columns[i % 3]:
            st.markdown(project_card_html(project), unsafe_allow_html=True)


def render_home(youth_houses: List[LocationRecord], featured: List[ProjectRecord],
                site_settings: Optional[SiteConfigRecord]) -> None:
    render_hero(site_settings, len(youth_houses))
    render_map_section(youth_houses, site_settings)
    render_featured_projects(featured)
    st.divider()
    render_contact_section(site_settings)


def _render_home_error() -> None:
    render_error_panel("Welcome to Entree Brussels")


def build_home_view(site_settings: Optional[SiteConfigRecord]) -> PageView:
    """Fetch the home page content; site settings are loaded by the caller."""
    metadata = site_metadata(site_settings)
    try:
        youth_houses = queries.get_youth_houses()
        featured = queries.get_featured_projects()
    except CMSFetchError as e:
        logger.error(f"Error loading home page data: {e}")
        return PageView(metadata=metadata, render=_render_home_error, status="error")

    logger.info(f"Home page: {len(youth_houses)} youth houses, {len(featured)} featured projects")
    return PageView(metadata=metadata,
                    render=lambda: render_home(youth_houses, featured, site_settings))
