"""mapbox-client - Mapbox geocoding and driving-duration client.

Architecture::

    coordinates.py   Coordinate pair codec (null -> NO_PATH_DURATION)
    query.py         Request filters -> URL query parameters
    schemas.py       Pydantic request/response models
    geocoding.py     GET /geocoding/v5/{mode}/{query}.json
    durations.py     POST /distances/{version}/mapbox/driving
    client.py        Client: API key, version, transport; public calls
    config.py        Settings from MAPBOX_* environment variables
    services/http.py Shared requests.Session and the request/decode step
    cli.py           mapbox-client command

Data flow: typed request -> Client -> encode -> one HTTP round trip -> decode
-> typed response or an error from errors.py.
"""

__version__ = "0.1.0"

from mapbox_client.client import Client
from mapbox_client.config import Settings, get_settings
from mapbox_client.coordinates import NO_PATH_DURATION, CoordinatePair
from mapbox_client.errors import DecodeError, EncodingError, MapboxError, StatusError
from mapbox_client.schemas import (
    DurationRequest,
    DurationResponse,
    GeocodeContext,
    GeocodeFeature,
    GeocodeMode,
    GeocodeRequest,
    GeocodeResponse,
    GeocodeType,
    Geometry,
    ReverseGeocodeRequest,
)

__all__ = [
    "NO_PATH_DURATION",
    "Client",
    "CoordinatePair",
    "DecodeError",
    "DurationRequest",
    "DurationResponse",
    "EncodingError",
    "GeocodeContext",
    "GeocodeFeature",
    "GeocodeMode",
    "GeocodeRequest",
    "GeocodeResponse",
    "GeocodeType",
    "Geometry",
    "MapboxError",
    "ReverseGeocodeRequest",
    "Settings",
    "StatusError",
    "__version__",
    "get_settings",
]
