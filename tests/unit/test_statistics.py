"""
Unit tests for statistics parsing.
"""

import json
from datetime import datetime, timezone

import pytest

from apiaxle import Granularity, HitType
from apiaxle.domains.statistics.service import fetch_stats, parse_stats
from apiaxle.shared.exceptions import DataParsingError, EnvelopeError, EnvelopeTypeError


@pytest.mark.unit
class TestParseStats:

    def test_three_level_mapping(self, sample_stats_response):
        stats = parse_stats(json.dumps(sample_stats_response))

        first = datetime.fromtimestamp(1364236800, tz=timezone.utc)
        second = datetime.fromtimestamp(1364240400, tz=timezone.utc)
        assert set(stats) == {HitType.UNCACHED, HitType.CACHED, HitType.ERROR}
        assert stats[HitType.UNCACHED] == {first: {200: 4, 404: 1}, second: {200: 2}}

    def test_missing_results(self):
        with pytest.raises(EnvelopeError):
            parse_stats(b'{"meta": {}}')

    def test_unknown_hit_type(self):
        with pytest.raises(DataParsingError):
            parse_stats(b'{"results": {"bogus": {}}}')

    def test_non_numeric_timestamp(self):
        with pytest.raises(DataParsingError):
            parse_stats(b'{"results": {"cached": {"noon": {"200": 1}}}}')

    def test_out_of_range_timestamp(self):
        with pytest.raises(DataParsingError) as exc_info:
            parse_stats(b'{"results": {"cached": {"99999999999999999": {"200": 1}}}}')
        assert "99999999999999999" in str(exc_info.value)

    def test_non_numeric_count(self):
        with pytest.raises(DataParsingError):
            parse_stats(b'{"results": {"cached": {"1364236800": {"200": "1"}}}}')

    def test_bucket_must_be_map(self):
        with pytest.raises(EnvelopeTypeError) as exc_info:
            parse_stats(b'{"results": {"cached": {"1364236800": 3}}}')
        assert exc_info.value.actual_type == "number"

    def test_hit_type_must_be_map(self):
        with pytest.raises(EnvelopeTypeError) as exc_info:
            parse_stats(b'{"results": {"cached": [1, 2]}}')
        assert exc_info.value.actual_type == "array"


@pytest.mark.unit
class TestFetchStats:

    def test_query_from_datetimes(self, client, fake_axle):
        fake_axle.reply("GET", "/v1/api/github/stats", {"results": {}})

        stats = fetch_stats(
            client, "api", "github",
            datetime(2013, 3, 25, tzinfo=timezone.utc),
            datetime(2013, 3, 26, tzinfo=timezone.utc),
            Granularity.DAY,
            forkey="acme"
        )

        assert stats == {}
        params = fake_axle.last_request.url.params
        assert params["from"] == "1364169600"
        assert params["to"] == "1364256000"
        assert params["granularity"] == "day"
        assert params["forkey"] == "acme"

    def test_invalid_granularity(self, client):
        with pytest.raises(ValueError):
            fetch_stats(client, "api", "github", 0, 1, "fortnight")

    def test_granularity_str(self):
        assert str(Granularity.MINUTE) == "minute"
