"""
Configuration management for the youth houses map.

Map display, tile provider, marker and popup settings are read from a JSON file
merged over built-in defaults. The per-view center and zoom come from the CMS
site settings and are modeled by MapViewConfig.
"""

import json
import math
import os
from dataclasses import dataclass
from typing import Dict, Any, Optional, List
import logging

logger = logging.getLogger(__name__)

BRUSSELS_CENTER = (50.8476, 4.3572)
DEFAULT_ZOOM = 12


@dataclass(frozen=True)
class MapViewConfig:
    """Center and zoom of one map view."""
    center_lat: float = BRUSSELS_CENTER[0]
    center_lng: float = BRUSSELS_CENTER[1]
    zoom: float = DEFAULT_ZOOM

    @property
    def location(self) -> List[float]:
        return [self.center_lat, self.center_lng]

    @classmethod
    def from_site_settings(cls, site_settings=None,
                           default_center: Optional[List[float]] = None,
                           default_zoom: float = DEFAULT_ZOOM) -> "MapViewConfig":
        """
        Build view config from CMS site settings, falling back to defaults.

        Args:
            site_settings: SiteConfigRecord or None
            default_center: [lat, lng] used when settings carry no usable center
            default_zoom: Zoom used when settings carry no positive zoom

        Returns:
            MapViewConfig
        """
        lat, lng = default_center or BRUSSELS_CENTER
        zoom = default_zoom

        if site_settings is not None:
            lat = _parse_float(site_settings.map_center_lat, lat)
            lng = _parse_float(site_settings.map_center_lng, lng)
            if site_settings.map_zoom is not None and site_settings.map_zoom > 0:
                zoom = site_settings.map_zoom

        return cls(center_lat=lat, center_lng=lng, zoom=zoom)


def _parse_float(value: Optional[str], fallback: float) -> float:
    if not value:
        return fallback
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return fallback
    return parsed if math.isfinite(parsed) else fallback


class MapSettingsConfig:
    """Manages map display settings."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or "map_settings_config.json"
        self.default_config = self._get_default_config()
        self.config = self._load_config()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default map configuration."""
        return {
            "map_settings": {
                "default_center": list(BRUSSELS_CENTER),
                "default_zoom": DEFAULT_ZOOM,
                "height": 384,
                "fit_to_markers": False,
                "fullscreen_control": True
            },
            "tiles": {
                "url_template": "https://api.mapbox.com/styles/v1/{style}/tiles/{{z}}/{{x}}/{{y}}?access_token={token}",
                "style": "mapbox/light-v11",
                "attribution": "© Mapbox © OpenStreetMap contributors",
                "tile_size": 512,
                "zoom_offset": -1
            },
            "credentials": {
                "placeholder_tokens": ["pk.test"]
            },
            "markers": {
                "size": 30,
                "gradient": ["#FF6B35", "#4ECDC4"],
                "border_color": "white"
            },
            "popup": {
                "excerpt_length": 120,
                "max_width": 300,
                "detail_link_template": "/?youth_house={slug}",
                "validate_ranges": True
            }
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file or use defaults."""
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    config = json.load(f)
                logger.info(f"Loaded map configuration from {self.config_path}")

                # Merge with defaults to ensure all keys exist
                return self._merge_configs(self.default_config, config)
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load config from {self.config_path}: {e}")
                logger.info("Using default configuration")
                return self._get_default_config()
        else:
            logger.info(f"Config file {self.config_path} not found, using defaults")
            return self._get_default_config()

    def _merge_configs(self, default: Dict, user: Dict) -> Dict:
        """Recursively merge user config with defaults."""
        merged = default.copy()

        for key, value in user.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._merge_configs(merged[key], value)
            else:
                merged[key] = value

        return merged

    def get_map_settings(self) -> Dict[str, Any]:
        """Get map display settings."""
        return self.config["map_settings"]

    def get_tile_settings(self) -> Dict[str, Any]:
        return self.config["tiles"]

    def get_marker_settings(self) -> Dict[str, Any]:
        return self.config["markers"]

    def get_popup_settings(self) -> Dict[str, Any]:
        return self.config["popup"]

    def get_placeholder_tokens(self) -> List[str]:
        """Access token values treated as 'not configured'."""
        return list(self.config["credentials"].get("placeholder_tokens", []))

    def default_view_config(self, site_settings=None) -> MapViewConfig:
        """View config for a site, using this file's default center and zoom."""
        settings = self.get_map_settings()
        return MapViewConfig.from_site_settings(
            site_settings,
            default_center=settings.get("default_center"),
            default_zoom=settings.get("default_zoom", DEFAULT_ZOOM)
        )


# Global configuration instance
_map_config = None

def get_map_config(config_path: Optional[str] = None) -> MapSettingsConfig:
    """Get global map configuration instance."""
    global _map_config
    if _map_config is None:
        _map_config = MapSettingsConfig(config_path)
    return _map_config
