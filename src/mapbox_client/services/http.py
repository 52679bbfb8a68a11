"""
Shared HTTP transport.

Provides a pre-configured ``requests.Session`` for talking to Mapbox. Every
call is a single round trip: the mounted adapter never retries, and no
timeout is applied unless one is asked for.

Usage::

    from mapbox_client.services.http import session

    resp = session.get("https://api.mapbox.com/...", timeout=30)

Pass your own session to ``Client(session=...)`` for proxies, timeouts, or
tests.
"""

from __future__ import annotations

import logging
import re
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from mapbox_client import __version__
from mapbox_client.errors import DecodeError, StatusError

logger = logging.getLogger(__name__)

#: Single attempt: no connect, read or status retries.
NO_RETRY = Retry(total=0, read=False, raise_on_status=False)

USER_AGENT = f"mapbox-client/{__version__}"

ModelT = TypeVar("ModelT", bound=BaseModel)

_TOKEN_RE = re.compile(r"(access_token=)[^&]*")


def redact(url: str) -> str:
    """Hide the access token in a URL before it is logged or raised."""
    return _TOKEN_RE.sub(r"\1REDACTED", url)


def status_ok(code: int) -> bool:
    return 200 <= code <= 299


def fetch_model(
    http: requests.Session,
    method: str,
    url: str,
    model: type[ModelT],
    **kwargs: Any,
) -> ModelT:
    """
    Make one request and decode a 2xx JSON body into ``model``.

    The response is streamed and always closed: on a non-2xx status the body
    is never read.

    Args:
        http: Transport to send through.
        method: HTTP method.
        url: Absolute URL.
        model: Pydantic model the body must validate against.
        **kwargs: Passed through to ``Session.request`` (``params``, ``json``, ...).

    Raises:
        requests.RequestException: The request itself failed.
        StatusError: The status was outside 200-299.
        DecodeError: The body was not JSON or did not match ``model``.
    """
    with http.request(method, url, stream=True, **kwargs) as resp:
        safe_url = redact(resp.url or url)
        logger.debug("%s %s -> %s", method, safe_url, resp.status_code)

        if not status_ok(resp.status_code):
            logger.warning("%s %s failed: %s %s", method, safe_url, resp.status_code, resp.reason)
            raise StatusError(resp.status_code, resp.reason or "", url=safe_url)

        blob = resp.content

    try:
        return model.model_validate_json(blob)
    except ValidationError as e:
        raise DecodeError(f"invalid {model.__name__} from {safe_url}: {e}") from e


def create_session(timeout: float | None = None) -> requests.Session:
    """
    Build a ``requests.Session`` with a no-retry adapter mounted.

    Args:
        timeout: Default timeout applied to every request that does not pass
            its own. None leaves requests unbounded.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    if timeout is None:
        return s

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, the default transport for every ``Client``.
session: requests.Session = create_session()
