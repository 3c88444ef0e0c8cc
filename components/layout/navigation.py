"""
Site navigation and routing.

Pages are chosen from the sidebar menu and remembered in
``st.session_state.current_page``. Two query parameters take precedence so
that pages can be linked to directly: ``youth_house=<slug>`` opens a youth
house detail page and ``page=<slug>`` opens a CMS content page.
"""

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

import streamlit as st
from streamlit_option_menu import option_menu

from components.cms.models import PageRecord
from utils.icons import get_icon

logger = logging.getLogger(__name__)

HOME = "home"
PROJECTS = "projects"
CONTACT = "contact"
CONTENT_PAGE = "page"
YOUTH_HOUSE = "youth_house"

YOUTH_HOUSE_PARAM = "youth_house"
PAGE_PARAM = "page"

DEFAULT_PAGE = "Home"

NAV_STYLES = {
    "container": {"padding": "0!important", "background-color": "#f0f2f6"},
    "icon": {"color": "#FF6B35", "font-size": "16px"},
    "nav-link": {
        "font-size": "14px",
        "text-align": "left",
        "margin": "0px",
        "color": "#262730",
        "background-color": "#f0f2f6",
        "--hover-color": "#fff1eb"
    },
    "nav-link-selected": {
        "background-color": "#fff1eb",
        "color": "#000000 !important",
        "font-weight": "bold"
    },
}


@dataclass(frozen=True)
class Route:
    kind: str
    slug: Optional[str] = None


@dataclass(frozen=True)
class NavItem:
    label: str
    icon: str
    route: Route


def build_nav_items(about_slug: str, pages: Sequence[PageRecord] = ()) -> List[NavItem]:
    """
    Sidebar entries: the fixed pages, then CMS pages flagged for navigation.

    CMS pages are ordered by ``nav_order`` (unordered pages last, then by title).
    """
    items = [
        NavItem("Home", get_icon('home'), Route(HOME)),
        NavItem("Projects", get_icon('projects'), Route(PROJECTS)),
        NavItem("About", get_icon('about'), Route(CONTENT_PAGE, about_slug)),
        NavItem("Contact", get_icon('contact'), Route(CONTACT)),
    ]
    taken = {item.label for item in items}

    extra = [p for p in pages if p.show_in_nav and p.slug != about_slug]
    extra.sort(key=lambda p: (p.nav_order is None, p.nav_order or 0, p.title))
    for page in extra:
        label = page.title or page.slug
        if label in taken:
            logger.warning(f"Skipping navigation entry for page {page.slug}: duplicate label '{label}'")
            continue
        taken.add(label)
        items.append(NavItem(label, get_icon('page'), Route(CONTENT_PAGE, page.slug)))

    return items


def _first_param(query_params: Mapping, name: str) -> Optional[str]:
    value = query_params.get(name)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def resolve_route(query_params: Mapping, current_page: Optional[str], nav_items: Sequence[NavItem]) -> Route:
    """
    Decide which page to show.

    Args:
        query_params: Current URL query parameters
        current_page: Menu label stored in session state
        nav_items: Available menu entries

    Returns:
        Route for the page to render
    """
    slug = _first_param(query_params, YOUTH_HOUSE_PARAM)
    if slug:
        return Route(YOUTH_HOUSE, slug)

    slug = _first_param(query_params, PAGE_PARAM)
    if slug:
        return Route(CONTENT_PAGE, slug)

    for item in nav_items:
        if item.label == current_page:
            return item.route

    return Route(HOME)


def render_navigation(nav_items: Sequence[NavItem], current_page: Optional[str]) -> str:
    """Render the sidebar menu and return the selected label."""
    labels = [item.label for item in nav_items]
    default_index = labels.index(current_page) if current_page in labels else 0

    with st.sidebar:
        st.markdown("### Entree Brussels")

        selected_page = option_menu(
            menu_title=None,
            options=labels,
            icons=[item.icon for item in nav_items],
            menu_icon="cast",
            default_index=default_index,
            orientation="vertical",
            key="nav_menu",
            styles=NAV_STYLES
        )

    return selected_page or labels[default_index]
