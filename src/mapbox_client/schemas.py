"""
Request and response models for the Mapbox geocoding and distance APIs.

Pydantic models describing both directions of the wire format. Field aliases
are the JSON names the service uses; Python names are used where the wire
name would be unclear (``bounding_box`` for ``bbox``).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from mapbox_client.coordinates import CoordinatePair

# =============================================================================
# Geocoding requests
# =============================================================================


class GeocodeMode(StrEnum):
    """Geocoding endpoint flavour."""

    PLACES = "mapbox.places"
    PERMANENT_PLACES = "mapbox.places-permanent"


class GeocodeType(StrEnum):
    """Feature types accepted by the ``types`` filter."""

    REGION = "region"
    POSTCODE = "postcode"
    PLACE = "place"
    LOCALITY = "locality"
    NEIGHBORHOOD = "neighborhood"
    ADDRESS = "address"
    POI = "poi"
    POI_LANDMARK = "poi.landmark"


class GeocodeRequest(BaseModel):
    """Optional filters for a geocoding lookup. Unset fields never reach the URL."""

    model_config = ConfigDict(populate_by_name=True)

    # ISO 3166 alpha 2 country codes
    country: list[str] | None = None
    limit: Annotated[int, Field(ge=0)] | None = None
    types: list[GeocodeType] | None = None
    proximity: CoordinatePair | None = None
    bounding_box: Annotated[list[float], Field(min_length=4, max_length=4)] | None = Field(
        default=None, alias="bbox"
    )
    autocomplete: bool | None = None


def _default_mode(value: Any) -> Any:
    return value or GeocodeMode.PLACES


class ReverseGeocodeRequest(BaseModel):
    """A free-text or ``"lon,lat"`` query plus optional filters."""

    query: str
    mode: Annotated[GeocodeMode, BeforeValidator(_default_mode)] = GeocodeMode.PLACES
    request: GeocodeRequest | None = None


# =============================================================================
# Geocoding responses
# =============================================================================


class Geometry(BaseModel):
    type: str = ""
    coordinates: list[float] = Field(default_factory=list)


class GeocodeContext(BaseModel):
    """One level of the administrative hierarchy around a feature."""

    id: str = ""
    text: str = ""
    short_code: str = ""
    wikidata: str = ""


class GeocodeFeature(BaseModel):
    """A single matched place."""

    id: str = ""
    type: str = ""
    text: str = ""
    place_name: str = ""
    # nominally 0.0-1.0; not enforced
    relevance: float = 0.0

    properties: dict[str, Any] | None = None
    context: list[GeocodeContext] = Field(default_factory=list)

    bbox: list[float] | None = None
    center: list[float] = Field(default_factory=list)
    geometry: Geometry | None = None
    attribution: str = ""


class GeocodeResponse(BaseModel):
    """Envelope returned by ``/geocoding/v5``."""

    type: str = ""
    query: CoordinatePair | None = None
    features: list[GeocodeFeature] = Field(default_factory=list)


# =============================================================================
# Distance matrix
# =============================================================================


class DurationRequest(BaseModel):
    """Locations to compute pairwise travel durations between."""

    coordinates: list[CoordinatePair]


class DurationResponse(BaseModel):
    """
    Pairwise travel durations in seconds.

    ``durations[i][j]`` is the time from location ``i`` to location ``j``.
    Unreachable pairs hold ``NO_PATH_DURATION``.
    """

    durations: list[CoordinatePair] = Field(default_factory=list)
