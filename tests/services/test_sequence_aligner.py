"""
Tests for aligning upstream hourly series.
"""

import pytest

from city_weather.models.upstream import UpstreamResponse
from city_weather.services.sequence_aligner import align_hourly_records, records_from_upstream

TIMES = ["2024-07-15T00:00", "2024-07-15T01:00", "2024-07-15T02:00", "2024-07-15T03:00"]
TEMPERATURES = [14.2, 13.8, 13.1, 12.9]
CODES = [0, 1, 45, 61]


class TestAlignHourlyRecords:
    """Test cases for align_hourly_records."""

    def test_equal_lengths(self):
        """Test all entries are kept when the series line up."""
        records = align_hourly_records(TIMES, TEMPERATURES, CODES)

        assert len(records) == 4
        assert [(r.time, r.temperature, r.weather_code) for r in records] == list(
            zip(TIMES, TEMPERATURES, CODES)
        )

    @pytest.mark.parametrize(
        "lengths",
        [(4, 3, 2), (2, 4, 3), (3, 2, 4), (1, 4, 4), (4, 4, 0)],
    )
    def test_truncates_to_shortest(self, lengths):
        """Test the output is as long as the shortest series, in order."""
        a, b, c = lengths
        records = align_hourly_records(TIMES[:a], TEMPERATURES[:b], CODES[:c])

        assert len(records) == min(lengths)
        for i, record in enumerate(records):
            assert record.time == TIMES[i]
            assert record.temperature == TEMPERATURES[i]
            assert record.weather_code == CODES[i]

    @pytest.mark.parametrize(
        "times,temperatures,codes",
        [
            (None, None, None),
            ([], [], []),
            (TIMES, None, CODES),
            (TIMES, TEMPERATURES, []),
        ],
    )
    def test_missing_series_give_empty_result(self, times, temperatures, codes):
        """Test absent or empty series never raise."""
        assert align_hourly_records(times, temperatures, codes) == ()


class TestRecordsFromUpstream:
    """Test cases for records_from_upstream."""

    def test_missing_hourly_block(self):
        """Test a body without hourly data yields no records."""
        response = UpstreamResponse.model_validate(
            {"latitude": 60.17, "longitude": 24.94, "timezone": "Europe/Helsinki"}
        )

        assert records_from_upstream(response) == ()

    def test_partial_hourly_block(self):
        """Test a hourly block with one series missing yields no records."""
        response = UpstreamResponse.model_validate(
            {"hourly": {"time": TIMES, "temperature_2m": TEMPERATURES}}
        )

        assert records_from_upstream(response) == ()

    def test_uneven_hourly_block(self):
        """Test uneven series from the provider are truncated."""
        response = UpstreamResponse.model_validate(
            {
                "latitude": 60.17,
                "longitude": 24.94,
                "timezone": "Europe/Helsinki",
                "hourly": {
                    "time": TIMES,
                    "temperature_2m": TEMPERATURES[:3],
                    "weather_code": CODES,
                },
                "hourly_units": {"temperature_2m": "°C"},
            }
        )

        records = records_from_upstream(response)

        assert len(records) == 3
        assert records[-1].time == "2024-07-15T02:00"
        assert records[-1].weather_code == 45
