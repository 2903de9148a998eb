"""Tests for batch row normalization."""

from datetime import datetime, timezone

from revdecision.config.defaults import IngestionParams
from revdecision.data.normalizer import RecordNormalizer


class TestRecordNormalizer:

    def test_keeps_valid_rows_sorted(self, sample_rows):
        """Test keeps valid rows sorted"""
        result = RecordNormalizer().normalize(sample_rows)

        assert result.success
        assert [r.timestamp for r in result.records] == [
            datetime(2023, 1, 15, tzinfo=timezone.utc),
            datetime(2023, 2, 15, tzinfo=timezone.utc),
            datetime(2023, 3, 15, tzinfo=timezone.utc),
            datetime(2024, 3, 15, tzinfo=timezone.utc),
        ]
        assert [r.revenue for r in result.records] == [10500.0, 11000.0, 12000.5, 9800.0]

    def test_counts_dropped_rows(self, sample_rows):
        """Test counts dropped rows"""
        result = RecordNormalizer().normalize(sample_rows)

        assert result.dropped_count == 3
        assert [d.index for d in result.dropped] == [4, 5, 6]

    def test_non_mapping_rows_dropped(self):
        """Test non mapping rows dropped"""
        result = RecordNormalizer().normalize([["2024-01-01", 10], None])

        assert not result.success
        assert result.dropped_count == 2
        assert result.dropped[0].reason == "Row is not a mapping"

    def test_empty_input(self):
        """Test empty input"""
        result = RecordNormalizer().normalize([])

        assert result.records == ()
        assert result.dropped == ()

    def test_custom_params(self):
        """Test custom params"""
        normalizer = RecordNormalizer(IngestionParams(date_keys=("when",), revenue_keys=("gross",)))
        result = normalizer.normalize([
            {"when": "2024-01-01", "gross": 5},
            {"date": "2024-01-01", "revenue": 5},
        ])

        assert len(result.records) == 1
        assert result.dropped_count == 1

    def test_normalize_sheets(self):
        """Test normalize sheets"""
        result = RecordNormalizer().normalize_sheets({
            "2024": [{"date": "2024-02-01", "revenue": 20}],
            "2023": [
                {"date": "2023-02-01", "revenue": 10},
                {"date": "2023-03-01", "revenue": "bad"},
            ],
        })

        assert [r.year for r in result.records] == [2023, 2024]
        assert result.dropped_count == 1
        assert result.dropped[0].index == 1
        assert result.dropped[0].reason.startswith("2023: ")
