"""
Environment-driven settings for the youth houses site.

Secrets and endpoints come from the process environment (or a local .env file):
the Cosmic bucket credentials used by the CMS client and the Mapbox access token
used by the interactive map.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from environs import Env

logger = logging.getLogger(__name__)

env = Env()
env.read_env()

DEFAULT_COSMIC_API_URL = "https://api.cosmicjs.com/v3"


@dataclass
class AppSettings:
    """Runtime settings resolved from the environment."""
    cosmic_bucket_slug: Optional[str] = None
    cosmic_read_key: Optional[str] = None
    cosmic_api_url: str = DEFAULT_COSMIC_API_URL
    cosmic_timeout: float = 10.0
    mapbox_access_token: Optional[str] = None
    map_config_path: Optional[str] = None
    about_page_slug: str = "about-entree"

    @property
    def cms_configured(self) -> bool:
        return bool(self.cosmic_bucket_slug and self.cosmic_read_key)


def load_settings() -> AppSettings:
    """Read settings from the current environment."""
    settings = AppSettings(
        cosmic_bucket_slug=env.str("COSMIC_BUCKET_SLUG", None),
        cosmic_read_key=env.str("COSMIC_READ_KEY", None),
        cosmic_api_url=env.str("COSMIC_API_URL", DEFAULT_COSMIC_API_URL),
        cosmic_timeout=env.float("COSMIC_TIMEOUT", 10.0),
        mapbox_access_token=env.str("MAPBOX_ACCESS_TOKEN", None),
        map_config_path=env.str("MAP_CONFIG_PATH", None),
        about_page_slug=env.str("ABOUT_PAGE_SLUG", "about-entree"),
    )

    if not settings.cms_configured:
        logger.warning("Cosmic bucket slug or read key not set; CMS requests will fail")

    return settings
