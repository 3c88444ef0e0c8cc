"""
Map view lifecycle.

A MapView owns one live map instance and the markers drawn on it. Initialization
of the map backend completes through a Future; the view listens for completion
and only then draws markers. Closing the view releases the map and every marker,
and a map delivered by an initialization that completes afterwards is released
without being used.

States:
    UNINITIALIZED -> LOADING -> READY
    UNINITIALIZED -> UNAVAILABLE   (no access token, or backend failed)
    any state -> UNINITIALIZED     (close)
"""

import logging
from concurrent.futures import Future
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence

from components.cms.models import LocationRecord

from .map_config import MapViewConfig
from .markers import GeoPoint, LocationMarkerPipeline

logger = logging.getLogger(__name__)

NO_TOKEN_REASON = "No map access token configured"


class MapViewState(Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    UNAVAILABLE = "unavailable"


@dataclass
class MarkerHandle:
    """One record's marker, owned by the view that created it."""
    record: LocationRecord
    point: GeoPoint
    marker: Any
    released: bool = False

    @property
    def slug(self) -> str:
        return self.record.slug


@dataclass
class _InitTicket:
    future: Optional[Future] = None
    cancelled: bool = False


def has_usable_token(token: Optional[str], placeholder_tokens: Sequence[str] = ()) -> bool:
    """True when a map access token is set and is not a known placeholder."""
    if not token or not token.strip():
        return False
    return token.strip() not in set(placeholder_tokens)


class MapView:
    """Scoped owner of one map instance and its markers."""

    def __init__(self, backend, pipeline: Optional[LocationMarkerPipeline] = None,
                 access_token: Optional[str] = None,
                 placeholder_tokens: Sequence[str] = ("pk.test",)):
        self.backend = backend
        self.pipeline = pipeline or LocationMarkerPipeline()
        self.access_token = access_token
        self.placeholder_tokens = list(placeholder_tokens)

        self.state = MapViewState.UNINITIALIZED
        self.config: Optional[MapViewConfig] = None
        self.map = None
        self.unavailable_reason: Optional[str] = None
        self.markers: List[MarkerHandle] = []

        self._ticket: Optional[_InitTicket] = None
        self._records: Optional[Sequence[LocationRecord]] = None
        self._pending_records: Optional[Sequence[LocationRecord]] = None

    @property
    def is_ready(self) -> bool:
        return self.state is MapViewState.READY

    @property
    def is_unavailable(self) -> bool:
        return self.state is MapViewState.UNAVAILABLE

    def open(self, config: Optional[MapViewConfig] = None) -> "MapView":
        """
        Start initializing the map backend.

        Never raises for backend problems: a missing credential or a failed
        initialization leaves the view UNAVAILABLE with a reason.

        Returns:
            self, usable as a context manager that closes the view on exit
        """
        if self.state is not MapViewState.UNINITIALIZED:
            self.close()

        self.config = config or MapViewConfig()
        self.unavailable_reason = None
        self._records = None
        self._pending_records = None

        if not has_usable_token(self.access_token, self.placeholder_tokens):
            self._mark_unavailable(NO_TOKEN_REASON)
            return self

        self.state = MapViewState.LOADING
        ticket = _InitTicket()
        self._ticket = ticket

        try:
            ticket.future = self.backend.initialize(self.config, self.access_token)
        except Exception as e:
            logger.error(f"Map backend failed to start: {e}")
            self._mark_unavailable(f"Map failed to load: {e}")
            return self

        ticket.future.add_done_callback(lambda future: self._on_initialized(ticket, future))
        return self

    def _on_initialized(self, ticket: _InitTicket, future: Future) -> None:
        if ticket.cancelled or ticket is not self._ticket:
            logger.debug("Ignoring map initialization result for a closed view")
            self._release_late_map(future)
            return

        if future.cancelled():
            self._mark_unavailable("Map initialization was cancelled")
            return

        error = future.exception()
        if error is not None:
            logger.error(f"Map initialization failed: {error}")
            self._mark_unavailable(f"Map failed to load: {error}")
            return

        self.map = future.result()
        self.state = MapViewState.READY
        logger.debug("Map view ready")

        if self._pending_records is not None:
            records, self._pending_records = self._pending_records, None
            self.rebuild_markers(records)

    def _release_late_map(self, future: Future) -> None:
        """Release a map delivered after its view was closed."""
        if future.cancelled() or future.exception() is not None:
            return
        try:
            self.backend.release(future.result())
        except Exception as e:
            logger.warning(f"Failed to release late map: {e}")

    def _mark_unavailable(self, reason: str) -> None:
        self.state = MapViewState.UNAVAILABLE
        self.unavailable_reason = reason
        self._pending_records = None
        logger.warning(f"Map unavailable: {reason}")

    def recenter(self, config: MapViewConfig) -> None:
        """Move an existing view; markers are left as they are."""
        self.config = config
        if self.is_ready:
            self.backend.recenter(self.map, config)

    def rebuild_markers(self, records: Sequence[LocationRecord]) -> None:
        """
        Replace every marker on the view with markers for `records`.

        While the view is LOADING the records are kept and drawn once it is
        READY. In any other state nothing is drawn.
        """
        if self.state is MapViewState.LOADING:
            self._records = records
            self._pending_records = records
            return

        if not self.is_ready:
            logger.debug(f"Skipping marker rebuild in state {self.state.value}")
            return

        self._records = records
        self._clear_markers()

        for spec in self.pipeline.prepare(records):
            try:
                marker = self.backend.add_marker(self.map, spec)
            except Exception as e:
                logger.warning(f"Failed to add marker for youth house {spec.record.slug}: {e}")
                continue
            self.markers.append(MarkerHandle(
                record=spec.record,
                point=spec.point,
                marker=marker
            ))

        logger.info(f"Rendered {len(self.markers)} of {len(records)} youth houses on map")

    def sync(self, records: Sequence[LocationRecord], config: Optional[MapViewConfig] = None) -> None:
        """Rebuild when the record list changed, re-center when the config changed."""
        if config is not None and config != self.config:
            self.recenter(config)
        if records is not self._records:
            self.rebuild_markers(records)

    def _clear_markers(self) -> None:
        for handle in self.markers:
            if handle.released:
                continue
            try:
                self.backend.remove_marker(self.map, handle.marker)
            except Exception as e:
                logger.warning(f"Failed to remove marker for youth house {handle.slug}: {e}")
            handle.released = True
        self.markers = []

    def close(self) -> None:
        """Release markers and the map; safe to call in any state."""
        if self._ticket is not None:
            self._ticket.cancelled = True
            self._ticket = None

        if self.map is not None:
            self._clear_markers()
            try:
                self.backend.release(self.map)
            except Exception as e:
                logger.warning(f"Failed to release map: {e}")

        self.map = None
        self.markers = []
        self._records = None
        self._pending_records = None
        self.state = MapViewState.UNINITIALIZED

    def __enter__(self) -> "MapView":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def rebuild_markers(records: Sequence[LocationRecord], map_view: MapView,
                    config: Optional[MapViewConfig] = None) -> None:
    """Re-center `map_view` when `config` differs, then rebuild its markers."""
    if config is not None and config != map_view.config:
        map_view.recenter(config)
    map_view.rebuild_markers(records)
