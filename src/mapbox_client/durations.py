"""
Driving-duration matrix.

Request format::

    POST /distances/{version}/mapbox/driving?access_token={key}
    {"coordinates": [[lon, lat], ...]}
"""

from __future__ import annotations

import logging

import requests
from pydantic_core import PydanticSerializationError

from mapbox_client.errors import EncodingError
from mapbox_client.schemas import DurationRequest, DurationResponse
from mapbox_client.services.http import fetch_model

logger = logging.getLogger(__name__)


def durations_url(base_url: str, version: str) -> str:
    return f"{base_url.rstrip('/')}/distances/{version}/mapbox/driving"


def request_durations(
    http: requests.Session,
    base_url: str,
    version: str,
    api_key: str,
    req: DurationRequest,
) -> DurationResponse:
    """
    Fetch the N x N duration matrix for ``req.coordinates``.

    Raises:
        EncodingError: The coordinates could not be serialized.
        StatusError: Non-2xx response. The body is not decoded.
        DecodeError: Body was not a valid duration matrix.
    """
    try:
        body = req.model_dump(mode="json")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodingError(f"cannot serialize DurationRequest: {e}") from e

    logger.debug("Requesting durations for %d locations", len(req.coordinates))
    return fetch_model(
        http,
        "POST",
        durations_url(base_url, version),
        DurationResponse,
        params={"access_token": api_key},
        json=body,
    )
