"""
Shared page plumbing: a page view couples metadata with its renderer, plus the
panels shown when content is missing or cannot be loaded.
"""

from dataclasses import dataclass
from typing import Callable

import streamlit as st

from .metadata import PageMetadata


@dataclass
class PageView:
    """Data for one page has been fetched; `render` draws it."""
    metadata: PageMetadata
    render: Callable[[], None]
    status: str = "ok"  # ok | not_found | error


def render_error_panel(title: str, message: str = "Unable to load content. Please check your connection and try again.") -> None:
    st.title(title)
    st.error(message)


def render_not_found(kind: str = "page") -> None:
    st.title(f"{kind.capitalize()} not found")
    st.info(f"The requested {kind} could not be found.")
    st.markdown("[← Back to home](/)")
