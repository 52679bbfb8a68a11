"""
Flatten a request-filter object into URL query parameters.

The object is serialized to JSON and loaded back into a plain dict, so the
fields that survive are exactly the ones the model would put on the wire.
Empty values (``None``, ``""``, ``0``, ``False``, ``[]``) are then dropped,
and each remaining value is expanded by type:

- ``str``             -> one parameter
- ``int``             -> one parameter, decimal
- ``bool``            -> ``"true"`` / ``"false"``
- list of numbers     -> one parameter per element, fixed-point (``13.418940``)
- list of strings     -> one parameter per element, verbatim
- anything else       -> dropped

A coordinate pair such as ``proximity`` is a list of numbers, so it becomes
one parameter per coordinate and nothing else.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from mapbox_client.errors import EncodingError

logger = logging.getLogger(__name__)

QueryParams = list[tuple[str, str]]


def _to_json_dict(obj: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    try:
        if isinstance(obj, BaseModel):
            blob = obj.model_dump_json(by_alias=True, exclude_none=True)
        else:
            blob = json.dumps(dict(obj))
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodingError(f"cannot serialize {type(obj).__name__}: {e}") from e

    recv = json.loads(blob)
    if not isinstance(recv, dict):
        raise EncodingError(f"{type(obj).__name__} did not serialize to a JSON object")
    return recv


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, dict)):
        return len(value) == 0
    return _is_number(value) and value == 0


def to_query_params(obj: BaseModel | Mapping[str, Any] | None) -> QueryParams:
    """
    Encode a filter object as an ordered list of ``(key, value)`` pairs.

    Args:
        obj: A pydantic model, a plain mapping, or None.

    Returns:
        Parameters in field order, suitable for ``requests``' ``params=``.

    Raises:
        EncodingError: If ``obj`` cannot be serialized to a JSON object.
    """
    if obj is None:
        return []

    params: QueryParams = []
    for key, value in _to_json_dict(obj).items():
        if _is_empty(value):
            continue
        if isinstance(value, str):
            params.append((key, value))
        elif isinstance(value, bool):
            params.append((key, "true" if value else "false"))
        elif isinstance(value, int):
            params.append((key, str(value)))
        elif isinstance(value, list) and all(_is_number(v) for v in value):
            params.extend((key, f"{v:f}") for v in value)
        elif isinstance(value, list) and all(isinstance(v, str) for v in value):
            params.extend((key, v) for v in value)
        else:
            logger.debug("Dropping query field %r of type %s", key, type(value).__name__)

    return params
