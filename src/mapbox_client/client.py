"""
Mapbox API client.

Example::

    from mapbox_client import Client

    client = Client()  # access token from MAPBOX_API_KEY
    match = client.lookup_place("Los Angeles")
    for feature in match.features:
        print(feature.place_name, feature.relevance, feature.center)

    resp = client.lookup_lat_lon(38.8971, -77.0366)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mapbox_client import durations, geocoding
from mapbox_client.config import DEFAULT_API_VERSION, DEFAULT_BASE_URL, Settings, get_settings
from mapbox_client.locking import ReadWriteLock
from mapbox_client.schemas import (
    DurationRequest,
    DurationResponse,
    GeocodeResponse,
    ReverseGeocodeRequest,
)
from mapbox_client.services import http

if TYPE_CHECKING:
    import requests

logger = logging.getLogger(__name__)


class Client:
    """
    Configuration plus the public API calls.

    Unset options fall back to :func:`get_settings` (API key, version, base
    URL) and to the shared :data:`mapbox_client.services.http.session`.
    Settings are read once per process, not per call.

    Safe to share between threads. Configuration reads take the shared side of
    a reader/writer lock and setters take the exclusive side; the lock is
    never held across a network call.
    """

    def __init__(
        self,
        api_key: str | None = None,
        api_version: str | None = None,
        session: requests.Session | None = None,
        base_url: str | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._lock = ReadWriteLock()
        self._api_key = api_key or ""
        self._api_version = api_version or ""
        self._session = session
        self._base_url = base_url or ""
        self._settings = settings

    def __repr__(self) -> str:
        return f"Client(api_version={self.api_version!r}, base_url={self.base_url!r})"

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def _defaults(self) -> Settings:
        return self._settings if self._settings is not None else get_settings()

    @property
    def api_key(self) -> str:
        with self._lock.read():
            if self._api_key:
                return self._api_key
            return self._defaults().api_key

    @api_key.setter
    def api_key(self, key: str) -> None:
        self.set_api_key(key)

    def set_api_key(self, key: str) -> None:
        with self._lock.write():
            self._api_key = key

    @property
    def api_version(self) -> str:
        with self._lock.read():
            if self._api_version:
                return self._api_version
            return self._defaults().api_version or DEFAULT_API_VERSION

    @api_version.setter
    def api_version(self, version: str) -> None:
        with self._lock.write():
            self._api_version = version

    @property
    def session(self) -> requests.Session:
        with self._lock.read():
            if self._session is not None:
                return self._session
            return http.session

    @session.setter
    def session(self, session: requests.Session | None) -> None:
        with self._lock.write():
            self._session = session

    @property
    def base_url(self) -> str:
        with self._lock.read():
            if self._base_url:
                return self._base_url
            return self._defaults().base_url or DEFAULT_BASE_URL

    def with_session(self, session: requests.Session) -> Client:
        """Copy of this client that sends through ``session``."""
        with self._lock.read():
            return Client(
                api_key=self._api_key,
                api_version=self._api_version,
                session=session,
                base_url=self._base_url,
                settings=self._settings,
            )

    def durations_url(self) -> str:
        return durations.durations_url(self.base_url, self.api_version)

    def geocoding_url(self, req: ReverseGeocodeRequest) -> str:
        return geocoding.geocoding_url(self.base_url, req.mode, req.query)

    # -------------------------------------------------------------------------
    # Geocoding
    # -------------------------------------------------------------------------

    def lookup_place(self, query: str) -> GeocodeResponse:
        """Look up a place by name, for example ``"Los Angeles"`` or ``"Edmonton"``."""
        return self.reverse_geocoding(ReverseGeocodeRequest(query=query))

    def lookup_lat_lon(self, lat: float, lon: float) -> GeocodeResponse:
        """Reverse-geocode a latitude/longitude pair."""
        return self.reverse_geocoding(
            ReverseGeocodeRequest(query=geocoding.lat_lon_query(lat, lon))
        )

    def reverse_geocoding(self, req: ReverseGeocodeRequest) -> GeocodeResponse:
        """
        Resolve a query to places, e.g. ``"-77.036,38.897"`` -> 1600 Pennsylvania Ave NW.

        Raises:
            EncodingError: ``req.request`` could not be serialized.
            StatusError: Non-2xx response, including 404 for unknown places.
            DecodeError: The body was not a geocoding response.
            requests.RequestException: The request itself failed.
        """
        return geocoding.geocode(self.session, self.base_url, self.api_key, req)

    # -------------------------------------------------------------------------
    # Distances
    # -------------------------------------------------------------------------

    def request_duration(self, req: DurationRequest) -> DurationResponse:
        """
        Driving durations between every pair of ``req.coordinates``.

        Raises:
            EncodingError: The coordinates could not be serialized.
            StatusError: Non-2xx response.
            DecodeError: The body was not a duration matrix.
            requests.RequestException: The request itself failed.
        """
        return durations.request_durations(
            self.session, self.base_url, self.api_version, self.api_key, req
        )
