"""
Spatial data helpers for the youth houses map.

Validated marker positions are collected into a GeoDataFrame (EPSG:4326) so the
map can be fitted to the extent of the mapped youth houses.
"""

from typing import List, Optional, Sequence
import logging

import geopandas as gpd
import pandas as pd
from shapely.geometry import Point

from .markers import MarkerSpec

logger = logging.getLogger(__name__)

WGS84 = "EPSG:4326"


def build_location_frame(specs: Sequence[MarkerSpec]) -> gpd.GeoDataFrame:
    """
    Collect placed markers into a point GeoDataFrame.

    Args:
        specs: Marker specs or marker handles (anything with .record and .point)

    Returns:
        GeoDataFrame with slug, name and neighborhood columns
    """
    rows = pd.DataFrame({
        'slug': [spec.record.slug for spec in specs],
        'name': [spec.record.display_name for spec in specs],
        'neighborhood': [spec.record.neighborhood for spec in specs],
    })
    geometry = [Point(spec.point.lng, spec.point.lat) for spec in specs]
    return gpd.GeoDataFrame(rows, geometry=geometry, crs=WGS84)


def marker_bounds(frame: gpd.GeoDataFrame) -> Optional[List[List[float]]]:
    """
    Leaflet-style bounds [[south, west], [north, east]] of the points.

    Returns None when there are fewer than two distinct points, since a single
    position has no extent to fit.
    """
    if frame.empty:
        return None

    minx, miny, maxx, maxy = frame.total_bounds
    if minx == maxx and miny == maxy:
        return None

    return [[float(miny), float(minx)], [float(maxy), float(maxx)]]


def neighborhood_counts(frame: gpd.GeoDataFrame) -> pd.Series:
    """Number of mapped youth houses per neighborhood."""
    if frame.empty:
        return pd.Series(dtype='int64')
    return frame['neighborhood'].fillna('Other').value_counts()
