"""
Maps Component - Interactive youth houses map.

This component turns youth house records into map markers with detail popups,
manages the lifecycle of the live map view, and falls back to a text listing
when the map cannot be shown.

Maps are rendered using Folium with Mapbox tiles.
"""

from .map_section import render_interactive_map
from .map_config import MapSettingsConfig, MapViewConfig
from .map_view import MapView, MapViewState, rebuild_markers
from .markers import LocationMarkerPipeline, build_popup_content, validate_coordinates

__all__ = [
    'render_interactive_map',
    'MapSettingsConfig',
    'MapViewConfig',
    'MapView',
    'MapViewState',
    'rebuild_markers',
    'LocationMarkerPipeline',
    'build_popup_content',
    'validate_coordinates'
]
