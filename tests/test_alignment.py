# Tests for mortgage_rate_dashboard/indicators/alignment.py

from datetime import date

from mortgage_rate_dashboard.indicators.alignment import (
    align_to_labels,
    align_union,
    union_labels,
)
from mortgage_rate_dashboard.models.market_data import AlignedPoint, Observation


D1, D2, D3 = date(2024, 5, 1), date(2024, 5, 2), date(2024, 5, 3)


class TestAlignToLabels:
    def test_gaps_where_sparse_series_has_no_print(self):
        aligned = align_to_labels([D1, D2, D3], [Observation(D2, 7.22)])
        assert [p.value for p in aligned] == [None, 7.22, None]
        assert [p.date for p in aligned] == [D1, D2, D3]

    def test_exact_match_only(self):
        # A print one day off the labels is not carried to the nearest date
        aligned = align_to_labels([D1, D3], [Observation(D2, 7.22)])
        assert all(p.is_absent for p in aligned)

    def test_no_intersection_is_all_absent(self):
        aligned = align_to_labels([D1, D2], [Observation(date(2024, 4, 25), 7.1)])
        assert aligned == [AlignedPoint(D1, None), AlignedPoint(D2, None)]

    def test_empty_series(self):
        assert align_to_labels([D1, D2], []) == [AlignedPoint(D1, None), AlignedPoint(D2, None)]

    def test_empty_labels(self):
        assert align_to_labels([], [Observation(D1, 7.0)]) == []

    def test_duplicate_dates_keep_last_value(self):
        aligned = align_to_labels([D1, D2], [Observation(D2, 7.0), Observation(D2, 7.5)])
        assert [p.value for p in aligned] == [None, 7.5]

    def test_output_follows_label_order(self):
        series = [Observation(D1, 1.0), Observation(D3, 3.0)]
        aligned = align_to_labels([D3, D2, D1], series)
        assert [p.value for p in aligned] == [3.0, None, 1.0]


class TestAlignUnion:
    def test_union_labels_sorted(self):
        a = [Observation(D3, 1.0), Observation(D1, 2.0)]
        b = [Observation(D2, 3.0), Observation(D1, 4.0)]
        assert union_labels(a, b) == [D1, D2, D3]

    def test_two_monthly_series(self):
        jan, feb, mar = date(2024, 1, 1), date(2024, 2, 1), date(2024, 3, 1)
        cpi = [Observation(jan, 308.4), Observation(feb, 310.3)]
        pce = [Observation(jan, 120.1), Observation(mar, 121.0)]

        labels, (cpi_aligned, pce_aligned) = align_union(cpi, pce)

        assert labels == [jan, feb, mar]
        assert [p.value for p in cpi_aligned] == [308.4, 310.3, None]
        assert [p.value for p in pce_aligned] == [120.1, None, 121.0]

    def test_one_side_empty(self):
        cpi = [Observation(D1, 308.4)]
        labels, (cpi_aligned, pce_aligned) = align_union(cpi, [])
        assert labels == [D1]
        assert cpi_aligned == [AlignedPoint(D1, 308.4)]
        assert pce_aligned == [AlignedPoint(D1, None)]
