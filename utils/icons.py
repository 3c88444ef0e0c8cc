"""
Icon utilities for the youth houses site.
Provides consistent Bootstrap icon styling across pages, matching the icons used
by the streamlit-option-menu navigation.
"""

import html

import streamlit as st

BOOTSTRAP_ICONS_CSS = "https://cdn.jsdelivr.net/npm/bootstrap-icons@1.11.3/font/bootstrap-icons.min.css"

PRIMARY_COLOR = "#FF6B35"


def load_icon_stylesheet() -> None:
    """Make Bootstrap icons available to markdown rendered on the page."""
    st.markdown(f'<link rel="stylesheet" href="{BOOTSTRAP_ICONS_CSS}">', unsafe_allow_html=True)


def render_icon_header(icon_name: str, text: str, level: int = 1, color: str = PRIMARY_COLOR) -> None:
    """
    Render a header with a Bootstrap icon.

    Args:
        icon_name: Bootstrap icon name (e.g., 'geo-alt', 'people', etc.)
        text: Header text
        level: Header level (1-6)
        color: Icon color
    """
    icon_size = {1: 32, 2: 24, 3: 20, 4: 18, 5: 16, 6: 14}.get(level, 20)

    st.markdown(f"""
    <div style="display: flex; align-items: center; margin-bottom: 1rem;">
        <i class="bi bi-{icon_name}" style="font-size: {icon_size}px; color: {color}; margin-right: 12px;"></i>
        <h{level} style="margin: 0;">{html.escape(text)}</h{level}>
    </div>
    """, unsafe_allow_html=True)


def render_icon_text(icon_name: str, text: str, size: int = 16, color: str = PRIMARY_COLOR,
                     href: str = None) -> None:
    """
    Render text with a Bootstrap icon inline.

    Args:
        icon_name: Bootstrap icon name
        text: Text to display
        size: Icon size in pixels
        color: Icon color
        href: Optional link target for the text
    """
    label = html.escape(text)
    if href:
        label = f'<a href="{html.escape(href, quote=True)}" target="_blank" rel="noopener noreferrer">{label}</a>'

    st.markdown(f"""
    <div style="display: flex; align-items: center; margin-bottom: 0.5rem;">
        <i class="bi bi-{icon_name}" style="font-size: {size}px; color: {color}; margin-right: 8px;"></i>
        <span>{label}</span>
    </div>
    """, unsafe_allow_html=True)


def render_title_with_icon(icon_name: str, title: str) -> None:
    """Render a page title with icon."""
    render_icon_header(icon_name, title, level=1)


def render_subheader_with_icon(icon_name: str, subheader: str) -> None:
    """Render a subsection header with icon."""
    render_icon_header(icon_name, subheader, level=3)


# Icon mapping for consistent usage across pages
PAGE_ICONS = {
    # Navigation
    'home': 'house',
    'projects': 'kanban',
    'about': 'info-circle',
    'contact': 'envelope',
    'page': 'file-text',

    # Youth house details
    'address': 'geo-alt',
    'phone': 'telephone',
    'email': 'envelope',
    'website': 'globe',
    'hours': 'clock',
    'ages': 'people',
    'activities': 'stars',
    'gallery': 'images',

    # Social
    'instagram': 'instagram',
    'facebook': 'facebook',
    'twitter': 'twitter-x',
}


def get_icon(key: str) -> str:
    """Get the icon name for a page or field key."""
    return PAGE_ICONS.get(key, 'circle')
