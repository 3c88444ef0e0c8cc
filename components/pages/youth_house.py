"""
Youth house detail page.

Reached through the ``youth_house`` query parameter, which is what the
"Learn More" link in each map popup points at.
"""

import html
import logging
from typing import List, Optional, Tuple

import pandas as pd
import streamlit as st

from components.cms import queries
from components.cms.errors import CMSFetchError
from components.cms.models import LocationRecord
from components.maps.markers import safe_website
from utils.icons import get_icon, render_icon_text, render_subheader_with_icon, render_title_with_icon

from .metadata import youth_house_metadata
from .view import PageView, render_error_panel, render_not_found

logger = logging.getLogger(__name__)

GALLERY_LIMIT = 6
HERO_IMAGE_SIZE = (1200, 500)
GALLERY_IMAGE_SIZE = (400, 300)


def render_back_link() -> None:
    if st.button("← Back to Map", key="back_to_map"):
        st.query_params.clear()
        st.session_state.current_page = "Home"
        st.rerun()


def render_house_details(house: LocationRecord) -> None:
    """Main column: image, description, activities and gallery."""
    if house.featured_image is not None:
        st.image(house.featured_image.sized(*HERO_IMAGE_SIZE), use_container_width=True)

    if house.description:
        st.subheader("About")
        # Description is rich text authored in the CMS
        st.markdown(house.description, unsafe_allow_html=True)

    activities = house.activity_lines()
    if activities:
        render_subheader_with_icon(get_icon('activities'), "Activities")
        st.markdown("\n".join(f"- {html.escape(a)}" for a in activities))

    gallery = house.gallery[:GALLERY_LIMIT]
    if gallery:
        render_subheader_with_icon(get_icon('gallery'), "Gallery")
        columns = st.columns(3)
        for i, image in enumerate(gallery):
            with columns[i % 3]:
                st.image(image.sized(*GALLERY_IMAGE_SIZE), use_container_width=True)


def contact_rows(house: LocationRecord) -> List[Tuple[str, str, Optional[str]]]:
    """(icon, text, link) rows for the contact sidebar."""
    rows = []
    if house.address:
        rows.append((get_icon('address'), house.address.replace("\n", ", "), None))
    if house.phone:
        rows.append((get_icon('phone'), house.phone, f"tel:{house.phone}"))
    if house.email:
        rows.append((get_icon('email'), house.email, f"mailto:{house.email}"))
    website = safe_website(house.website)
    if website:
        rows.append((get_icon('website'), "Visit Website", website))
    if house.age_range:
        rows.append((get_icon('ages'), f"Ages: {house.age_range}", None))
    return rows


def render_house_sidebar(house: LocationRecord) -> None:
    """Side column: contact details, age range and opening hours."""
    with st.container(border=True):
        st.markdown("#### Contact Information")
        for icon, text, href in contact_rows(house):
            render_icon_text(icon, text, href=href)

    rows = house.opening_hours_rows()
    if rows:
        with st.container(border=True):
            st.markdown("#### Opening Hours")
            hours = pd.DataFrame(rows, columns=["Day", "Hours"])
            st.dataframe(hours, hide_index=True, use_container_width=True)


def render_youth_house(house: LocationRecord) -> None:
    render_back_link()
    render_title_with_icon(get_icon('home'), house.display_name)
    if house.neighborhood:
        st.caption(house.neighborhood)

    main_col, side_col = st.columns([2, 1])
    with main_col:
        render_house_details(house)
    with side_col:
        render_house_sidebar(house)


def build_youth_house_view(slug: str) -> PageView:
    try:
        house = queries.get_youth_house_by_slug(slug)
    except CMSFetchError as e:
        logger.error(f"Error loading youth house {slug}: {e}")
        return PageView(metadata=youth_house_metadata(None),
                        render=lambda: render_error_panel("Youth House"),
                        status="error")

    if house is None:
        logger.info(f"Youth house not found: {slug}")
        return PageView(metadata=youth_house_metadata(None),
                        render=lambda: render_not_found("youth house"),
                        status="not_found")

    return PageView(metadata=youth_house_metadata(house), render=lambda: render_youth_house(house))
