"""
Unit tests for URL construction.
"""

from datetime import datetime, timezone

import pytest

from apiaxle.shared.urls import build_url, escape, to_unix_seconds


@pytest.mark.unit
class TestBuildUrl:
    """Path and query construction"""

    def test_reserved_characters_are_escaped(self):
        """Spaces and slashes in identifiers stay inside one segment"""
        url = build_url("http://axle:3000", ["keyring", "a b/c"])
        assert url == "http://axle:3000/v1/keyring/a%20b%2Fc"

    def test_escape_question_mark_and_ampersand(self):
        assert escape("x?y&z=1") == "x%3Fy%26z%3D1"

    def test_trailing_slash_on_address(self):
        url = build_url("http://axle:3000/", ["keyrings"])
        assert url == "http://axle:3000/v1/keyrings"

    def test_custom_version_endpoint(self):
        url = build_url("http://axle", ["api", "github"], version_endpoint="v2")
        assert url == "http://axle/v2/api/github"

    def test_query_order_and_booleans(self):
        url = build_url(
            "http://axle",
            ["keyring", "ring", "keys"],
            {"resolve": True, "from": 0, "to": 10}
        )
        assert url == "http://axle/v1/keyring/ring/keys?resolve=true&from=0&to=10"

    def test_query_skips_none_values(self):
        url = build_url("http://axle", ["keyring", "r", "stats"], {"from": 1, "forkey": None})
        assert url == "http://axle/v1/keyring/r/stats?from=1"

    def test_query_values_are_escaped(self):
        url = build_url("http://axle", ["keyring", "r", "stats"], {"forkey": "a b/c"})
        assert url.endswith("?forkey=a%20b%2Fc")


@pytest.mark.unit
class TestUnixSeconds:

    def test_aware_datetime(self):
        when = datetime(2013, 3, 25, tzinfo=timezone.utc)
        assert to_unix_seconds(when) == 1364169600

    def test_numeric_passthrough(self):
        assert to_unix_seconds(1364169600.9) == 1364169600
