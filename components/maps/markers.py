"""
Location marker pipeline.

Turns youth house records into map-ready marker specifications: coordinates are
validated, and each marker gets an HTML popup with the record's key details, a
plain-text excerpt of its description and a link to its detail page.
"""

import html
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from components.cms.models import LocationRecord

logger = logging.getLogger(__name__)

TAG_PATTERN = re.compile(r"<[^>]*>")
WHITESPACE_PATTERN = re.compile(r"\s+")
ELLIPSIS = "…"

DEFAULT_EXCERPT_LENGTH = 120
DEFAULT_DETAIL_LINK_TEMPLATE = "/?youth_house={slug}"


@dataclass(frozen=True)
class GeoPoint:
    """A validated WGS84 position."""
    lat: float
    lng: float

    @property
    def location(self) -> List[float]:
        return [self.lat, self.lng]


@dataclass
class MarkerSpec:
    """Everything needed to draw one marker."""
    record: LocationRecord
    point: GeoPoint
    popup_html: str
    tooltip: str


def _parse_coordinate(value: Optional[str]) -> Optional[float]:
    if value is None or not str(value).strip():
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    return parsed if math.isfinite(parsed) else None


def validate_coordinates(record: LocationRecord, check_ranges: bool = True) -> Optional[GeoPoint]:
    """
    Parse a record's latitude/longitude into a GeoPoint.

    Args:
        record: Location record
        check_ranges: Also require |lat| <= 90 and |lng| <= 180

    Returns:
        GeoPoint, or None when the record cannot be placed on the map
    """
    lat = _parse_coordinate(record.latitude)
    lng = _parse_coordinate(record.longitude)

    if lat is None or lng is None:
        logger.warning(f"Youth house '{record.slug}' has no usable coordinates "
                       f"(latitude={record.latitude!r}, longitude={record.longitude!r})")
        return None

    if check_ranges and (abs(lat) > 90 or abs(lng) > 180):
        logger.warning(f"Youth house '{record.slug}' coordinates out of range: {lat}, {lng}")
        return None

    return GeoPoint(lat, lng)


def strip_tags(text: Optional[str]) -> str:
    """Remove markup tags and collapse whitespace."""
    if not text:
        return ""
    return WHITESPACE_PATTERN.sub(" ", TAG_PATTERN.sub(" ", text)).strip()


def truncate_text(text: str, max_length: int) -> str:
    """
    Cap text at max_length characters, ellipsis included.

    Text already within the cap is returned unchanged, so applying this twice
    gives the same result as applying it once.
    """
    if len(text) <= max_length:
        return text
    if max_length < 1:
        return ""
    return text[:max_length - 1].rstrip() + ELLIPSIS


def excerpt(text: Optional[str], max_length: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Plain-text excerpt of a rich-text field."""
    return truncate_text(strip_tags(text), max_length)


def safe_website(url: Optional[str]) -> Optional[str]:
    """The URL when it is an http(s) link, else None."""
    if url and re.match(r"^https?://", url.strip(), re.IGNORECASE):
        return url.strip()
    return None


def build_popup_content(record: LocationRecord,
                        excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
                        detail_link_template: str = DEFAULT_DETAIL_LINK_TEMPLATE) -> str:
    """
    Create HTML popup content for a youth house marker.

    All record text is escaped; the description is reduced to a plain-text excerpt.
    """
    name = html.escape(record.display_name)

    content = f"""
    <div class="youth-house-popup" style="padding: 12px; min-width: 200px; font-family: 'Segoe UI', Arial, sans-serif;">
        <h3 style="margin: 0 0 8px 0; color: #2D3436; font-size: 16px; font-weight: bold;">{name}</h3>
    """

    if record.neighborhood:
        content += (f'<p style="margin: 0 0 8px 0; color: #636e72; font-size: 12px; '
                    f'text-transform: uppercase; letter-spacing: 0.5px;">{html.escape(record.neighborhood)}</p>')

    if record.address:
        address = html.escape(record.address.strip()).replace("\n", "<br>")
        content += f'<p style="margin: 0 0 8px 0; color: #636e72; font-size: 14px; line-height: 1.4;">{address}</p>'

    if record.age_range:
        content += (f'<p style="margin: 0 0 8px 0; color: #00b894; font-size: 14px; font-weight: 500;">'
                    f'Ages: {html.escape(record.age_range)}</p>')

    summary = excerpt(record.description, excerpt_length)
    if summary:
        content += f'<p style="margin: 0 0 12px 0; color: #2D3436; font-size: 13px;">{html.escape(summary)}</p>'

    actions = []
    if record.phone:
        phone_href = re.sub(r"[^\d+]", "", record.phone)
        actions.append(f'<a href="tel:{html.escape(phone_href, quote=True)}">📞 {html.escape(record.phone)}</a>')
    if record.email:
        actions.append(f'<a href="mailto:{html.escape(record.email.strip(), quote=True)}">✉️ Email</a>')
    website = safe_website(record.website)
    if website:
        actions.append(f'<a href="{html.escape(website, quote=True)}" target="_blank" '
                       f'rel="noopener noreferrer">🌐 Website</a>')
    if actions:
        content += f'<p style="margin: 0 0 12px 0; font-size: 13px;">{" &middot; ".join(actions)}</p>'

    detail_href = detail_link_template.format(slug=record.slug)
    content += f"""
        <a href="{html.escape(detail_href, quote=True)}" target="_top"
           style="display: inline-block; background: linear-gradient(135deg, #FF6B35 0%, #4ECDC4 100%);
                  color: white; padding: 6px 12px; border-radius: 6px; text-decoration: none;
                  font-size: 12px; font-weight: 500;">
            Learn More
        </a>
    </div>
    """
    return content


class LocationMarkerPipeline:
    """Converts location records into validated marker specifications."""

    def __init__(self, popup_settings: Optional[Dict[str, Any]] = None):
        popup_settings = popup_settings or {}
        self.excerpt_length = popup_settings.get("excerpt_length", DEFAULT_EXCERPT_LENGTH)
        self.detail_link_template = popup_settings.get("detail_link_template", DEFAULT_DETAIL_LINK_TEMPLATE)
        self.validate_ranges = popup_settings.get("validate_ranges", True)

    def validate_coordinates(self, record: LocationRecord) -> Optional[GeoPoint]:
        return validate_coordinates(record, check_ranges=self.validate_ranges)

    def build_popup_content(self, record: LocationRecord) -> str:
        return build_popup_content(record, self.excerpt_length, self.detail_link_template)

    def prepare(self, records: Iterable[LocationRecord]) -> List[MarkerSpec]:
        """
        Build marker specs for every mappable record, in input order.

        Records without usable coordinates are left out.
        """
        specs = []
        for record in records:
            point = self.validate_coordinates(record)
            if point is None:
                continue
            specs.append(MarkerSpec(
                record=record,
                point=point,
                popup_html=self.build_popup_content(record),
                tooltip=record.display_name
            ))
        return specs
