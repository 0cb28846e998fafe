"""
Statistics requests shared by keyrings, keys and apis.

ApiAxle answers ``GET /<resource>/<id>/stats`` with
``{"results": {"<hit type>": {"<unix seconds>": {"<status>": <count>}}}}``.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional, Union

from ...core.interfaces.base_api_client import RequestMethod
from ...shared.envelope import RESULTS, descend, json_type, load_response
from ...shared.exceptions import DataParsingError, EnvelopeTypeError
from ...shared.urls import to_unix_seconds
from .models import Granularity, HitType, StatsTable

logger = logging.getLogger(__name__)

TimeArg = Union[datetime, int, float]


def fetch_stats(
    client,
    resource_path: str,
    identifier: str,
    from_: TimeArg,
    to: TimeArg,
    granularity: Union[Granularity, str],
    forkey: Optional[str] = None,
    forapi: Optional[str] = None
) -> StatsTable:
    """Build the stats URL for one resource and fetch it"""
    query = {
        "from": to_unix_seconds(from_),
        "to": to_unix_seconds(to),
        "granularity": Granularity(granularity).value,
        "forkey": forkey or None,
        "forapi": forapi or None,
    }
    url = client.url(resource_path, identifier, "stats", query=query)
    return do_stats_request(client, url)


def do_stats_request(client, url: str) -> StatsTable:
    body = client.do_http_request(RequestMethod.GET, url)
    return parse_stats(body)


def parse_stats(body: Union[bytes, str]) -> StatsTable:
    """Decode a stats response into hit type -> bucket -> status -> count"""
    results = descend(load_response(body), RESULTS)

    stats: StatsTable = {}
    for hit_name, buckets in results.items():
        try:
            hit_type = HitType(hit_name)
        except ValueError:
            raise DataParsingError(f"Unknown hit type in stats response: {hit_name}")
        _require_map(buckets, hit_name)

        table = stats.setdefault(hit_type, {})
        for timestamp, counts in buckets.items():
            _require_map(counts, timestamp)
            table[_parse_timestamp(timestamp)] = {
                _parse_int(code, "status"): _parse_count(count, code)
                for code, count in counts.items()
            }

    logger.debug(f"Parsed stats for {len(stats)} hit type(s)")
    return stats


def _require_map(value: Any, key: str) -> None:
    if not isinstance(value, dict):
        raise EnvelopeTypeError(
            f"key {key} did not contain map",
            key=key,
            expected_type="object",
            actual_type=json_type(value)
        )


def _parse_int(value: str, what: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise DataParsingError(f"Invalid {what} in stats response: {value!r}")


def _parse_timestamp(value: str) -> datetime:
    seconds = _parse_int(value, "timestamp")
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise DataParsingError(f"Invalid timestamp in stats response: {value!r}")


def _parse_count(value: Any, code: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DataParsingError(f"Invalid count for {code} in stats response: {value!r}")
    return int(value)
