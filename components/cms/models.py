"""
Typed CMS records.

Cosmic returns every object as ``{id, slug, title, type, metadata: {...}}`` with an
open metadata bag. Each record kind is modeled explicitly and validated when it
enters the application; the ``type`` field tags the variant.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator


def _empty_to_none(value: Any) -> Any:
    if value == "" or value == {}:
        return None
    return value


class ImageRef(BaseModel):
    """Reference to an image hosted by the CMS (imgix-backed)."""
    url: str = ""
    imgix_url: Optional[str] = None

    def sized(self, width: int, height: int) -> str:
        """Cropped, compressed rendition URL."""
        base = self.imgix_url or self.url
        if not base:
            return ""
        return f"{base}?w={width}&h={height}&fit=crop&auto=format,compress"


class SelectOption(BaseModel):
    key: str
    value: str


class CosmicRecord(BaseModel):
    """Fields shared by every Cosmic object."""
    model_config = ConfigDict(extra="ignore")

    id: str
    slug: str
    title: str = ""
    created_at: Optional[str] = None
    modified_at: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def flatten_metadata(cls, data: Any) -> Any:
        # Metadata values win over top-level ones unless they are empty.
        if not isinstance(data, dict):
            return data
        merged = {k: v for k, v in data.items() if k != "metadata"}
        metadata = data.get("metadata") or {}
        if not isinstance(metadata, dict):
            raise ValueError(f"metadata must be an object, got {type(metadata).__name__}")
        for key, value in metadata.items():
            if value not in (None, "") or key not in merged:
                merged[key] = value
        return merged


class LocationRecord(CosmicRecord):
    """A youth house: one physical site, optionally geolocated."""
    type: Literal["youth-houses"] = "youth-houses"

    name: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    description: Optional[str] = None
    activities: Optional[str] = None
    opening_hours: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    neighborhood: Optional[str] = None
    age_range: Optional[str] = None
    featured_image: Optional[ImageRef] = None
    gallery: List[ImageRef] = Field(default_factory=list)

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def coordinates_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("featured_image", mode="before")
    @classmethod
    def blank_image(cls, value: Any) -> Any:
        return _empty_to_none(value)

    @field_validator("gallery", mode="before")
    @classmethod
    def blank_gallery(cls, value: Any) -> Any:
        if not value:
            return []
        return [item for item in value if isinstance(item, dict) and item.get("url")]

    @property
    def display_name(self) -> str:
        return self.name or self.title

    def activity_lines(self) -> List[str]:
        """Activities, one per line, without leading bullets."""
        if not self.activities:
            return []
        lines = []
        for line in self.activities.split("\n"):
            cleaned = line.replace("•", "", 1).strip()
            if cleaned:
                lines.append(cleaned)
        return lines

    def opening_hours_rows(self) -> List[tuple]:
        """(day, hours) pairs parsed from 'Day: hours' lines."""
        if not self.opening_hours:
            return []
        rows = []
        for line in self.opening_hours.split("\n"):
            if not line.strip():
                continue
            day, _, hours = line.partition(":")
            rows.append((day.strip(), hours.strip()))
        return rows


class ProjectRecord(CosmicRecord):
    """A community project run across one or more youth houses."""
    type: Literal["projects"] = "projects"

    short_description: str = ""
    full_description: Optional[str] = None
    status: Optional[SelectOption] = None
    category: Optional[SelectOption] = None
    featured_image: Optional[ImageRef] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    youth_houses_involved: List[LocationRecord] = Field(default_factory=list)
    featured_homepage: bool = False

    @field_validator("status", "category", mode="before")
    @classmethod
    def blank_option(cls, value: Any) -> Any:
        if isinstance(value, str) and value:
            return {"key": value.lower(), "value": value}
        return _empty_to_none(value)

    @field_validator("featured_image", mode="before")
    @classmethod
    def blank_image(cls, value: Any) -> Any:
        return _empty_to_none(value)

    @field_validator("youth_houses_involved", mode="before")
    @classmethod
    def resolved_houses_only(cls, value: Any) -> Any:
        # At depth 0 Cosmic returns ids instead of objects.
        if not value:
            return []
        return [item for item in value if isinstance(item, dict)]

    @field_validator("featured_homepage", mode="before")
    @classmethod
    def blank_flag(cls, value: Any) -> Any:
        return False if value in (None, "") else value


class PageRecord(CosmicRecord):
    """A free-form content page."""
    type: Literal["pages"] = "pages"

    content: Optional[str] = None
    seo_description: Optional[str] = None
    featured_image: Optional[ImageRef] = None
    show_in_nav: bool = False
    nav_order: Optional[int] = None

    @field_validator("featured_image", "nav_order", mode="before")
    @classmethod
    def blank_value(cls, value: Any) -> Any:
        return _empty_to_none(value)

    @field_validator("show_in_nav", mode="before")
    @classmethod
    def blank_flag(cls, value: Any) -> Any:
        return False if value in (None, "") else value


class SiteConfigRecord(CosmicRecord):
    """Singleton site settings object."""
    type: Literal["site-settings"] = "site-settings"

    site_title: Optional[str] = None
    site_description: Optional[str] = None
    hero_title: Optional[str] = None
    hero_subtitle: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    social_media: Dict[str, Optional[str]] = Field(default_factory=dict)
    brand_colors: Dict[str, str] = Field(default_factory=dict)
    map_center_lat: Optional[str] = None
    map_center_lng: Optional[str] = None
    map_zoom: Optional[float] = None

    @field_validator("map_center_lat", "map_center_lng", mode="before")
    @classmethod
    def center_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("map_zoom", mode="before")
    @classmethod
    def blank_zoom(cls, value: Any) -> Any:
        return _empty_to_none(value)

    @field_validator("social_media", "brand_colors", mode="before")
    @classmethod
    def blank_mapping(cls, value: Any) -> Any:
        return value or {}


CMSRecord = Annotated[
    Union[LocationRecord, ProjectRecord, PageRecord, SiteConfigRecord],
    Field(discriminator="type"),
]

_record_adapter = TypeAdapter(CMSRecord)


def parse_record(data: Dict[str, Any]) -> CMSRecord:
    """Validate a raw Cosmic object into the record class matching its type."""
    return _record_adapter.validate_python(data)
