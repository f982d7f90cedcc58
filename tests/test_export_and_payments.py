# Tests for export rows and the payment calculator

from datetime import date

import pytest

from mortgage_rate_dashboard.config import TimeRange
from mortgage_rate_dashboard.indicators.calculator import SnapshotAssembler
from mortgage_rate_dashboard.indicators.export import (
    EXPORT_COLUMNS,
    ExportRow,
    export_filename,
    export_frame,
    export_rows,
)
from mortgage_rate_dashboard.indicators.payments import (
    calculate_payment,
    compare_extra_payment,
    scheduled_payment,
)


class TestExport:
    def test_rows_pair_survey_rate_by_date(self, bundle, events):
        snapshot = SnapshotAssembler(events.append).assemble(bundle, 2.0)

        assert export_rows(snapshot) == [
            ExportRow(date(2024, 5, 1), 4.20, 6.2, None),
            ExportRow(date(2024, 5, 2), 4.25, 6.25, 7.22),
            ExportRow(date(2024, 5, 3), 4.30, 6.3, None),
        ]

    def test_frame(self, bundle, events):
        snapshot = SnapshotAssembler(events.append).assemble(bundle, 2.0)
        frame = export_frame(snapshot)

        assert list(frame.columns) == EXPORT_COLUMNS
        assert frame["Date"].tolist() == ["2024-05-01", "2024-05-02", "2024-05-03"]
        assert frame["Actual Mortgage"].isna().tolist() == [True, False, True]

    def test_filename(self):
        assert export_filename(TimeRange.DAYS_180, date(2024, 5, 3)) == (
            "mortgage-trends-180d-2024-05-03.csv"
        )


class TestPayments:
    def test_scheduled_payment(self):
        assert scheduled_payment(100000, 6.0, 30) == pytest.approx(599.55, abs=0.01)

    def test_zero_rate(self):
        assert scheduled_payment(120000, 0.0, 10) == pytest.approx(1000.0)

    def test_standard_schedule(self):
        result = calculate_payment(100000, 6.0, 30)
        assert result.months_to_payoff == 360
        assert result.total_interest == pytest.approx(599.55 * 360 - 100000, abs=5)
        assert result.monthly_payment == pytest.approx(result.monthly_principal_interest)

    def test_escrow_included(self):
        result = calculate_payment(100000, 6.0, 30, property_tax=1200, home_insurance=600, pmi=50)
        assert result.monthly_taxes_insurance == pytest.approx(200.0)
        assert result.monthly_payment == pytest.approx(result.monthly_principal_interest + 200.0)
        assert result.total_payment == pytest.approx(
            result.total_interest + 100000 + 200.0 * 360
        )

    def test_escrow_excluded(self):
        result = calculate_payment(
            100000, 6.0, 30, property_tax=1200, home_insurance=600, include_extras=False
        )
        assert result.monthly_payment == pytest.approx(result.monthly_principal_interest)
        assert result.total_payment == pytest.approx(result.total_interest + 100000)

    def test_extra_principal_shortens_loan(self):
        comparison = compare_extra_payment(200000, 6.0, 30, 200)
        assert comparison.months_saved > 0
        assert comparison.interest_saved > 0
        assert comparison.with_extra.months_to_payoff < 360
