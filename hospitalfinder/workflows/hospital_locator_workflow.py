"""Hospital locator session.

Owns the transient state of one user session and wires the pieces together:

    start()  ── resolve location ──┬── ok ──────► nearby search (default radius)
                                   └── failed ──► "Unable to retrieve location…"

    search(query) ── detect_search_mode ──┬── text   ► text-filtered search
                                          ├── nearby ► nearby search
                                          └── none   ► "Location not available…"

Every search takes the next sequence number. When a search finishes after a
newer one was started its result is discarded.
"""
from __future__ import annotations

import threading
from typing import Callable, List, Optional

import structlog

from hospitalfinder.config import FinderSettings
from hospitalfinder.constants import LOCATION_FAILED_MESSAGE, LOCATION_MISSING_MESSAGE, SearchMode
from hospitalfinder.exceptions import LocationUnavailable, OverpassError
from hospitalfinder.nodes.search_dispatcher_node import detect_search_mode
from hospitalfinder.tools.hospital_tools import HospitalRecord, nearby_search, text_search
from hospitalfinder.tools.location_tools import LocationProvider, UnavailableLocationProvider
from hospitalfinder.tools.overpass_tools import OverpassClient
from hospitalfinder.workflows.state import FinderState, get_initial_state

logger = structlog.get_logger(__name__)


class HospitalLocatorWorkflow:
    """One user session of the hospital locator."""

    def __init__(
        self,
        settings: Optional[FinderSettings] = None,
        client: Optional[OverpassClient] = None,
        location_provider: Optional[LocationProvider] = None,
    ) -> None:
        self.settings = settings or FinderSettings()
        self.client = client or OverpassClient(self.settings)
        self.location_provider = location_provider or UnavailableLocationProvider()
        self._state = get_initial_state()
        self._lock = threading.Lock()
        self._started = False

    @property
    def state(self) -> FinderState:
        """Snapshot of the current state."""
        with self._lock:
            return self._snapshot()

    def start(self) -> FinderState:
        """Resolve the user's location once and run the initial nearby search."""
        with self._lock:
            if self._started:
                return self._snapshot()
            self._started = True

        try:
            coords = self.location_provider.resolve()
        except LocationUnavailable as e:
            logger.warning("Location resolution failed", error=str(e))
            with self._lock:
                self._state["error"] = LOCATION_FAILED_MESSAGE
            return self.state

        logger.info("Location resolved", lat=coords.lat, lon=coords.lon)
        with self._lock:
            self._state["user_location"] = coords
        return self.search_nearby(self.settings.radius_m)

    def search(self, query: str = "") -> FinderState:
        """Handle a search action (button click or Enter) for *query*."""
        with self._lock:
            self._state["query"] = query or ""
            location = self._state["user_location"]

        mode = detect_search_mode(query, location)
        logger.info("Search dispatched", mode=mode)
        if mode == SearchMode.TEXT:
            return self.search_text(query)
        if mode == SearchMode.NEARBY:
            return self.search_nearby()
        with self._lock:
            self._state["error"] = LOCATION_MISSING_MESSAGE
        return self.state

    def search_nearby(self, radius_m: Optional[int] = None) -> FinderState:
        """Nearby search around the resolved location."""
        with self._lock:
            location = self._state["user_location"]
            if location is None:
                self._state["error"] = LOCATION_MISSING_MESSAGE
                return self._snapshot()

        radius = radius_m or self.settings.radius_m
        return self._run(
            "Nearby search",
            lambda: nearby_search(
                location.lat,
                location.lon,
                radius,
                client=self.client,
                limit=self.settings.result_limit,
            ),
        )

    def search_text(self, query: str) -> FinderState:
        """Text-filtered search over the configured bounding box; blank queries are ignored."""
        if not query or not query.strip():
            return self.state

        return self._run(
            "Text search",
            lambda: text_search(
                query,
                client=self.client,
                bbox=self.settings.bbox,
                limit=self.settings.result_limit,
            ),
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> HospitalLocatorWorkflow:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _snapshot(self) -> FinderState:
        # caller holds self._lock
        snapshot = FinderState(**self._state)
        snapshot["hospitals"] = list(self._state["hospitals"])
        return snapshot

    def _run(self, label: str, search: Callable[[], List[HospitalRecord]]) -> FinderState:
        """Run *search* as a new sequenced search; the result is always published."""
        seq = self._begin()
        records: List[HospitalRecord] = []
        error = "Error fetching data: search did not complete"
        try:
            records = search()
            error = ""
        except (OverpassError, ValueError) as e:
            logger.error("Search failed", search=label, error=str(e))
            error = f"Error fetching data: {e}"
        finally:
            self._finish(seq, records, error)
        return self.state

    def _begin(self) -> int:
        """Reset result fields for a new search and return its sequence number."""
        with self._lock:
            self._state["request_seq"] += 1
            self._state["loading"] = True
            self._state["error"] = ""
            self._state["hospitals"] = []
            self._state["search_completed"] = False
            return self._state["request_seq"]

    def _finish(self, seq: int, records: List[HospitalRecord], error: str) -> bool:
        """Publish a search result unless a newer search has started since."""
        with self._lock:
            if seq != self._state["request_seq"]:
                logger.info("Stale search result discarded", seq=seq, latest=self._state["request_seq"])
                return False
            self._state["hospitals"] = records
            self._state["error"] = error
            self._state["loading"] = False
            self._state["search_completed"] = True
            return True
