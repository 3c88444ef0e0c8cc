"""
Map rendering module for the youth houses map.

This module creates Folium maps with Mapbox tiles, draws youth house markers with
popups, and embeds the result in Streamlit. MapRenderer is the backend a MapView
drives: it initializes maps, adds and removes markers and re-centers views.
"""

from concurrent.futures import Future
from typing import Any, Dict, List, Optional
import logging

import folium
from folium.plugins import Fullscreen
from streamlit_folium import st_folium

from .map_config import MapViewConfig
from .markers import MarkerSpec

logger = logging.getLogger(__name__)


class MapRenderer:
    """Core map rendering using Folium."""

    def __init__(self, tile_settings: Optional[Dict[str, Any]] = None,
                 marker_settings: Optional[Dict[str, Any]] = None,
                 popup_max_width: int = 300,
                 fullscreen_control: bool = True):
        self.tile_settings = tile_settings or {}
        self.marker_settings = marker_settings or {}
        self.popup_max_width = popup_max_width
        self.fullscreen_control = fullscreen_control

    def initialize(self, config: MapViewConfig, access_token: str) -> Future:
        """
        Create the base map for a view.

        Folium builds maps synchronously, so the returned Future is already
        resolved, either with the map or with the construction error.
        """
        future: Future = Future()
        try:
            future.set_result(self.create_base_map(config, access_token))
        except Exception as e:
            future.set_exception(e)
        return future

    def create_base_map(self, config: MapViewConfig, access_token: str) -> folium.Map:
        """
        Create base map with Mapbox tiles.

        Args:
            config: Center and zoom of the view
            access_token: Mapbox access token

        Returns:
            Folium Map object
        """
        m = folium.Map(
            location=config.location,
            zoom_start=config.zoom,
            tiles=None
        )

        folium.TileLayer(
            tiles=self.tile_url(access_token),
            attr=self.tile_settings.get('attribution', '© Mapbox © OpenStreetMap contributors'),
            name='Mapbox',
            tile_size=self.tile_settings.get('tile_size', 512),
            zoom_offset=self.tile_settings.get('zoom_offset', -1)
        ).add_to(m)

        if self.fullscreen_control:
            Fullscreen().add_to(m)

        logger.debug(f"Created base map centered at {config.location}")
        return m

    def tile_url(self, access_token: str) -> str:
        template = self.tile_settings.get(
            'url_template',
            "https://api.mapbox.com/styles/v1/{style}/tiles/{{z}}/{{x}}/{{y}}?access_token={token}"
        )
        return template.format(
            style=self.tile_settings.get('style', 'mapbox/light-v11'),
            token=access_token
        )

    def marker_icon(self) -> folium.DivIcon:
        """Round gradient marker."""
        size = self.marker_settings.get('size', 30)
        start, end = self.marker_settings.get('gradient', ['#FF6B35', '#4ECDC4'])
        border = self.marker_settings.get('border_color', 'white')

        return folium.DivIcon(
            html=f'''
            <div style="
                width: {size}px;
                height: {size}px;
                background: linear-gradient(135deg, {start} 0%, {end} 100%);
                border-radius: 50%;
                cursor: pointer;
                border: 3px solid {border};
                box-shadow: 0 2px 8px rgba(0,0,0,0.2);
            "></div>
            ''',
            icon_size=(size, size),
            icon_anchor=(size // 2, size // 2),
            class_name='youth-house-marker'
        )

    def add_marker(self, map_obj: folium.Map, spec: MarkerSpec) -> folium.Marker:
        """Add one youth house marker with its popup."""
        marker = folium.Marker(
            location=spec.point.location,
            popup=folium.Popup(spec.popup_html, max_width=self.popup_max_width),
            tooltip=folium.Tooltip(spec.tooltip, sticky=True),
            icon=self.marker_icon()
        )
        marker.add_to(map_obj)
        return marker

    def remove_marker(self, map_obj: folium.Map, marker: folium.Marker) -> None:
        map_obj._children.pop(marker.get_name(), None)

    def recenter(self, map_obj: folium.Map, config: MapViewConfig) -> None:
        map_obj.location = config.location
        map_obj.options['zoom'] = config.zoom

    def fit_to_bounds(self, map_obj: folium.Map, bounds: List[List[float]]) -> None:
        map_obj.fit_bounds(bounds, padding=(30, 30))

    def release(self, map_obj: folium.Map) -> None:
        """Drop any markers still attached to the map."""
        keys_to_remove = [key for key, child in map_obj._children.items()
                          if isinstance(child, folium.Marker)]
        for key in keys_to_remove:
            del map_obj._children[key]

    def render_to_streamlit(self, map_obj: folium.Map, height: int = 384, key: Optional[str] = None) -> None:
        """
        Render Folium map in Streamlit.

        Args:
            map_obj: Folium Map object
            height: Map height in pixels
            key: Streamlit widget key
        """
        st_folium(map_obj, width=None, height=height, returned_objects=[], key=key)
