"""
CMS-authored content pages (About and anything else editors publish).
"""

import logging

import streamlit as st

from components.cms import queries
from components.cms.errors import CMSFetchError
from components.cms.models import PageRecord
from utils.icons import get_icon, render_title_with_icon

from .metadata import content_page_metadata
from .view import PageView, render_error_panel, render_not_found

logger = logging.getLogger(__name__)

HERO_IMAGE_SIZE = (1200, 400)


def render_content_page(page: PageRecord) -> None:
    render_title_with_icon(get_icon('page'), page.title)
    if page.seo_description:
        st.markdown(f"*{page.seo_description}*")
    if page.featured_image is not None:
        st.image(page.featured_image.sized(*HERO_IMAGE_SIZE), use_container_width=True)
    if page.content:
        # Content is rich text authored in the CMS
        st.markdown(page.content, unsafe_allow_html=True)
    else:
        st.info("This page is being updated. Please check back soon.")


def build_content_page_view(slug: str) -> PageView:
    try:
        page = queries.get_page_by_slug(slug)
    except CMSFetchError as e:
        logger.error(f"Error loading page {slug}: {e}")
        return PageView(metadata=content_page_metadata(None),
                        render=lambda: render_error_panel("Page"),
                        status="error")

    if page is None:
        logger.info(f"Page not found: {slug}")
        return PageView(metadata=content_page_metadata(None),
                        render=lambda: render_not_found("page"),
                        status="not_found")

    return PageView(metadata=content_page_metadata(page), render=lambda: render_content_page(page))
