"""
Forward and reverse geocoding.

Request format::

    GET /geocoding/v5/{mode}/{query}.json?{filters}&access_token={key}

API docs: https://docs.mapbox.com/api/search/geocoding/
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import requests

from mapbox_client.query import to_query_params
from mapbox_client.schemas import GeocodeMode, GeocodeResponse, ReverseGeocodeRequest
from mapbox_client.services.http import fetch_model

logger = logging.getLogger(__name__)


def geocoding_url(base_url: str, mode: GeocodeMode | str | None, query: str) -> str:
    """
    Build the endpoint URL, without query string.

    The query is path-escaped; commas stay literal so ``"-77.036500,38.897100"``
    reads as a coordinate pair.
    """
    mode = GeocodeMode(mode or GeocodeMode.PLACES)
    return f"{base_url.rstrip('/')}/geocoding/v5/{mode}/{quote(query, safe=',')}.json"


def lat_lon_query(lat: float, lon: float) -> str:
    """Format a point as the service expects it: longitude first."""
    return f"{lon:f},{lat:f}"


def geocode(
    http: requests.Session,
    base_url: str,
    api_key: str,
    req: ReverseGeocodeRequest,
) -> GeocodeResponse:
    """
    Run one geocoding lookup.

    Args:
        http: Transport to send through.
        base_url: Service root, e.g. ``https://api.mapbox.com``.
        api_key: Access token appended as ``access_token``.
        req: Query, mode and optional filters.

    Returns:
        Decoded response; ``features`` may be empty.

    Raises:
        EncodingError: The filters could not be serialized.
        StatusError: Non-2xx response (e.g. 404 for an unknown place).
        DecodeError: Body was not a valid geocoding response.
    """
    params = to_query_params(req.request)
    params.append(("access_token", api_key))

    url = geocoding_url(base_url, req.mode, req.query)
    logger.debug("Geocoding %r (%s)", req.query, req.mode)
    return fetch_model(http, "GET", url, GeocodeResponse, params=params)
