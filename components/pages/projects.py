"""
Projects page: every community project as a card grid.
"""

import logging
from typing import List

import streamlit as st

from components.cms import queries
from components.cms.errors import CMSFetchError
from components.cms.models import ProjectRecord
from utils.icons import get_icon, render_title_with_icon

from .cards import project_card_html
from .metadata import projects_metadata
from .view import PageView, render_error_panel

logger = logging.getLogger(__name__)


def render_projects(projects: List[ProjectRecord]) -> None:
    render_title_with_icon(get_icon('projects'), "Community Projects")
    st.markdown("Explore the initiatives bringing young people together across Brussels youth houses.")

    if not projects:
        st.subheader("No Projects Yet")
        st.info("Check back soon for exciting community projects!")
        return

    columns = st.columns(3)
    for i, project in enumerate(projects):
        with columns[i % 3]:
            st.markdown(project_card_html(project), unsafe_allow_html=True)


def build_projects_view() -> PageView:
    metadata = projects_metadata()
    try:
        projects = queries.get_projects()
    except CMSFetchError as e:
        logger.error(f"Error loading projects: {e}")
        return PageView(metadata=metadata,
                        render=lambda: render_error_panel("Community Projects"),
                        status="error")

    return PageView(metadata=metadata, render=lambda: render_projects(projects))
