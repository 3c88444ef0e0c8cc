"""
Interactive youth houses map section.

Renders the map with one marker per geolocated youth house. When the map cannot
be shown (no access token, or the map failed to load) the same youth houses are
listed as text instead.
"""

import html
import logging
from typing import Optional, Sequence

import streamlit as st

from components.cms.models import LocationRecord, SiteConfigRecord
from components.settings import AppSettings, load_settings

from .map_config import MapSettingsConfig, get_map_config
from .map_renderer import MapRenderer
from .map_view import NO_TOKEN_REASON, MapView, MapViewState
from .markers import LocationMarkerPipeline
from .spatial_data import build_location_frame, marker_bounds, neighborhood_counts

logger = logging.getLogger(__name__)


def create_map_view(map_config: MapSettingsConfig, access_token: Optional[str]) -> MapView:
    """Wire a MapView to a Folium renderer using the map settings file."""
    map_settings = map_config.get_map_settings()
    renderer = MapRenderer(
        tile_settings=map_config.get_tile_settings(),
        marker_settings=map_config.get_marker_settings(),
        popup_max_width=map_config.get_popup_settings().get('max_width', 300),
        fullscreen_control=map_settings.get('fullscreen_control', True)
    )
    pipeline = LocationMarkerPipeline(map_config.get_popup_settings())
    return MapView(
        renderer,
        pipeline=pipeline,
        access_token=access_token,
        placeholder_tokens=map_config.get_placeholder_tokens()
    )


def render_fallback_list(youth_houses: Sequence[LocationRecord], reason: Optional[str] = None) -> None:
    """Textual listing shown in place of the map."""
    st.markdown("#### 📍 Interactive Map")
    if reason is None or reason == NO_TOKEN_REASON:
        st.info(
            "Map functionality requires a Mapbox access token. "
            "Please configure your environment variables to view the interactive map."
        )
    else:
        st.warning("The interactive map could not be loaded. Youth houses are listed below.")
    if reason:
        st.caption(reason)

    if not youth_houses:
        st.caption("No youth houses to show yet.")
        return

    for house in youth_houses:
        line = f"**{html.escape(house.display_name)}**"
        if house.neighborhood:
            line += f"  \n{html.escape(house.neighborhood)}"
        with st.container(border=True):
            st.markdown(line)


def render_interactive_map(youth_houses: Sequence[LocationRecord],
                           site_settings: Optional[SiteConfigRecord] = None,
                           map_config: Optional[MapSettingsConfig] = None,
                           settings: Optional[AppSettings] = None,
                           key: str = "youth_houses_map") -> MapViewState:
    """
    Render the youth houses map, or its text fallback.

    Args:
        youth_houses: Records to place on the map
        site_settings: CMS site settings providing center and zoom
        map_config: Map settings (defaults to the shared config)
        settings: Environment settings providing the access token
        key: Streamlit widget key

    Returns:
        State the map view reached before it was closed
    """
    settings = settings or load_settings()
    map_config = map_config or get_map_config(settings.map_config_path)
    map_settings = map_config.get_map_settings()
    view_config = map_config.default_view_config(site_settings)

    with create_map_view(map_config, settings.mapbox_access_token).open(view_config) as view:
        view.rebuild_markers(youth_houses)
        state = view.state

        if not view.is_ready:
            render_fallback_list(youth_houses, view.unavailable_reason)
            return state

        frame = build_location_frame(view.markers)

        if map_settings.get('fit_to_markers', False):
            bounds = marker_bounds(frame)
            if bounds is not None:
                view.backend.fit_to_bounds(view.map, bounds)

        try:
            view.backend.render_to_streamlit(view.map, height=map_settings.get('height', 384), key=key)
        except Exception as e:
            logger.error(f"Failed to render map: {e}")
            render_fallback_list(youth_houses, f"Map failed to load: {e}")
            return MapViewState.UNAVAILABLE

        counts = neighborhood_counts(frame)
        st.caption(f"{len(view.markers)} youth houses across {len(counts)} neighborhoods")

    return state
