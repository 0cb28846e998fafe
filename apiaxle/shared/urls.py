"""
URL construction for the ApiAxle management API.

Every path segment and query value is percent-encoded with no safe
characters, so identifiers containing ``/``, spaces or ``?`` stay a single
path segment.
"""

from datetime import datetime
from typing import Any, Mapping, Optional, Sequence, Union
from urllib.parse import quote, urlencode

from ..core.constants import VERSION_ENDPOINT


def escape(value: Any) -> str:
    """Percent-encode a single path segment or query value"""
    return quote(str(value), safe="")


def build_url(
    address: str,
    segments: Sequence[Any],
    query: Optional[Mapping[str, Any]] = None,
    version_endpoint: str = VERSION_ENDPOINT
) -> str:
    """
    Build ``<address><version_endpoint><seg>/<seg>?<query>``.

    Query entries whose value is ``None`` are skipped; booleans are
    rendered in lower case the way the server expects them.
    """
    base = address.rstrip("/") + "/" + version_endpoint.strip("/") + "/"
    url = base + "/".join(escape(segment) for segment in segments)

    if query:
        params = [
            (key, _query_value(value))
            for key, value in query.items()
            if value is not None
        ]
        if params:
            url += "?" + urlencode(params, quote_via=quote, safe="")
    return url


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_unix_seconds(value: Union[datetime, int, float]) -> int:
    """Convert a datetime (or an already numeric timestamp) to Unix seconds"""
    if isinstance(value, datetime):
        return int(value.timestamp())
    return int(value)
