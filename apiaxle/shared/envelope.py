"""
Decoding of the JSON envelope wrapped around ApiAxle responses.

Payloads live below one or more keys, e.g. ``{"results": {...}}`` for
reads and creates or ``{"results": {"new": {...}, "old": {...}}}`` for
updates. The helpers descend a key path, checking every step, and validate
the final object straight into a pydantic model.
"""

import json
from typing import Any, Dict, Mapping, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..core.constants import EnvelopeKeys
from .exceptions import (
    DataParsingError,
    DataValidationError,
    EnvelopeError,
    EnvelopeTypeError,
)

M = TypeVar("M", bound=BaseModel)

RESULTS = (EnvelopeKeys.RESULTS,)
UPDATED_RESULTS = (EnvelopeKeys.RESULTS, EnvelopeKeys.NEW)


def load_response(body: Union[bytes, str]) -> Dict[str, Any]:
    """Parse a response body that must be a JSON object"""
    try:
        response = json.loads(body)
    except ValueError as e:
        raw = body.decode("utf-8", "replace") if isinstance(body, bytes) else body
        raise DataParsingError(f"Unable to unmarshal response: {e}", raw_content=raw) from e

    if not isinstance(response, dict):
        raise EnvelopeTypeError(
            "Response is not a JSON object",
            expected_type="object",
            actual_type=json_type(response)
        )
    return response


def descend(response: Mapping[str, Any], path: Sequence[str]) -> Dict[str, Any]:
    """Walk ``path`` through nested objects, failing on missing keys or non-objects"""
    current = response
    for depth, key in enumerate(path):
        if key not in current:
            raise EnvelopeError(
                f"Response map did not contain expected key: {key}",
                key=key,
                path=path[:depth + 1]
            )
        value = current[key]
        if not isinstance(value, dict):
            raise EnvelopeTypeError(
                f"key {key} did not contain map",
                key=key,
                path=path[:depth + 1],
                expected_type="object",
                actual_type=json_type(value)
            )
        current = value
    return current


def validate(
    model: Type[M],
    data: Mapping[str, Any],
    defaults: Optional[Mapping[str, Any]] = None,
    overrides: Optional[Mapping[str, Any]] = None
) -> M:
    """
    Validate ``data`` into ``model``.

    ``defaults`` fill keys the payload lacks; ``overrides`` always win over
    the payload.
    """
    payload = {**(defaults or {}), **data, **(overrides or {})}
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise DataValidationError(
            f"Unable to decode {model.__name__} in response: {e.error_count()} validation error(s)",
            validation_errors=[str(err.get("msg")) for err in e.errors()],
            model_name=model.__name__
        ) from e


def unwrap(
    body: Union[bytes, str],
    path: Sequence[str],
    model: Type[M],
    defaults: Optional[Mapping[str, Any]] = None,
    overrides: Optional[Mapping[str, Any]] = None
) -> M:
    """Decode ``body``, descend ``path`` and validate the object found there"""
    return validate(model, descend(load_response(body), path), defaults, overrides)


def unwrap_mapping(body: Union[bytes, str], path: Sequence[str] = RESULTS) -> Dict[str, Dict[str, Any]]:
    """Decode a ``{identifier: fields}`` mapping stored under ``path``"""
    entries = descend(load_response(body), path)
    for identifier, fields in entries.items():
        if not isinstance(fields, dict):
            raise EnvelopeTypeError(
                f"entry {identifier} did not contain map",
                key=identifier,
                path=tuple(path) + (identifier,),
                expected_type="object",
                actual_type=json_type(fields)
            )
    return entries


def unwrap_bool(body: Union[bytes, str], key: str = EnvelopeKeys.RESULTS) -> bool:
    """Read a top-level boolean acknowledgement"""
    response = load_response(body)
    if key not in response:
        raise EnvelopeError(f"Response map did not contain expected key: {key}", key=key, path=(key,))
    value = response[key]
    if not isinstance(value, bool):
        raise EnvelopeTypeError(
            f"key {key} did not contain a boolean",
            key=key,
            path=(key,),
            expected_type="boolean",
            actual_type=json_type(value)
        )
    return value


def json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"
