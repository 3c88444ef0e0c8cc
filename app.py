"""
Entree Brussels - Youth Houses Network, Streamlit application

Entry point: resolves which page to show, sets the page metadata, renders the
sidebar navigation and the selected page.
"""

import logging
from typing import List, Optional

import streamlit as st

from components.cms import queries
from components.cms.errors import CMSFetchError
from components.cms.models import PageRecord, SiteConfigRecord
from components.layout import build_nav_items, render_footer, render_navigation, resolve_route
from components.layout.navigation import CONTACT, CONTENT_PAGE, DEFAULT_PAGE, PROJECTS, YOUTH_HOUSE, Route
from components.pages import (
    PageView,
    build_contact_view,
    build_content_page_view,
    build_home_view,
    build_projects_view,
    build_youth_house_view,
)
from components.settings import load_settings
from utils.icons import load_icon_stylesheet

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


def load_site_settings() -> Optional[SiteConfigRecord]:
    """Site settings, or None when they cannot be loaded (defaults apply)."""
    try:
        return queries.get_site_settings()
    except CMSFetchError as e:
        logger.warning(f"Using default site settings: {e}")
        return None


def load_nav_pages() -> List[PageRecord]:
    try:
        return queries.get_pages()
    except CMSFetchError as e:
        logger.warning(f"Navigation limited to fixed pages: {e}")
        return []


def build_view(route: Route, site_settings: Optional[SiteConfigRecord]) -> PageView:
    """Fetch the data for a route and return its page view."""
    if route.kind == YOUTH_HOUSE:
        return build_youth_house_view(route.slug)
    if route.kind == CONTENT_PAGE:
        return build_content_page_view(route.slug)
    if route.kind == PROJECTS:
        return build_projects_view()
    if route.kind == CONTACT:
        return build_contact_view(site_settings)
    return build_home_view(site_settings)


def main():
    """Main Streamlit application entry point"""

    # Initialize current page in session state if not exists
    if 'current_page' not in st.session_state:
        st.session_state.current_page = DEFAULT_PAGE

    settings = load_settings()
    site_settings = load_site_settings()
    nav_items = build_nav_items(settings.about_page_slug, load_nav_pages())

    route = resolve_route(st.query_params, st.session_state.current_page, nav_items)
    view = build_view(route, site_settings)

    # Must run before any other Streamlit call
    st.set_page_config(
        page_title=view.metadata.title,
        page_icon="🏠",
        layout="wide",
        initial_sidebar_state="expanded",
        menu_items={"About": view.metadata.description}
    )
    load_icon_stylesheet()

    selected_page = render_navigation(nav_items, st.session_state.current_page)

    # Update session state only if page actually changed
    if selected_page != st.session_state.current_page:
        st.session_state.current_page = selected_page
        st.query_params.clear()
        st.rerun()

    logger.info(f"Rendering {route.kind} page ({view.status}): {view.metadata.title}")
    view.render()
    render_footer(site_settings)


if __name__ == "__main__":
    main()
