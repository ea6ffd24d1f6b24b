from __future__ import annotations

from datetime import date
from decimal import Decimal

from core.domain import DateWindow, TransactionKind

AS_OF = date(2024, 6, 30)


def _sum(rows, field):
    return sum((getattr(row.summary, field) for row in rows), Decimal("0"))


def test_year_summary_combines_ledger_and_obligations(ledger_books):
    fs = ledger_books["finance_service"]

    metrics = fs.get_dashboard_metrics(2024, as_of=AS_OF)
    summary = metrics.summary

    assert summary.revenue == Decimal("17000")
    assert summary.project_expenses == Decimal("1200")
    assert summary.general_expenses == Decimal("500")
    assert summary.obligation_expenses_actual == Decimal("6000")
    assert summary.obligation_expenses_projected == Decimal("14400")
    assert summary.total_expenses_actual == Decimal("7700")
    assert summary.total_expenses_projected == Decimal("16100")
    assert summary.gross_profit_actual == Decimal("9300")
    assert summary.gross_profit_projected == Decimal("900")
    assert round(summary.profit_margin_actual, 2) == Decimal("54.71")
    assert round(summary.profit_margin_projected, 2) == Decimal("5.29")


def test_pending_expenses_are_excluded_but_pending_income_counts(ledger_books):
    aggregator = ledger_books["finance_service"].aggregator
    window = DateWindow.for_year(2024)

    assert aggregator.completed_expenses(TransactionKind.PROJECT_EXPENSE, window) == Decimal("1200")
    assert aggregator.completed_expenses(TransactionKind.GENERAL_EXPENSE, window) == Decimal("500")
    # 10000 + 5000 receivables, 1500 completed + 500 pending income
    assert aggregator.revenue(window) == Decimal("17000")


def test_actual_never_exceeds_projected(ledger_books):
    metrics = ledger_books["finance_service"].get_dashboard_metrics(2024, as_of=AS_OF)
    for row in metrics.breakdown:
        assert row.summary.obligation_expenses_actual <= row.summary.obligation_expenses_projected
        assert row.summary.total_expenses_actual <= row.summary.total_expenses_projected


def test_month_without_revenue_reports_zero_margin(ledger_books):
    metrics = ledger_books["finance_service"].get_dashboard_metrics(2024, 1, as_of=AS_OF)

    assert metrics.breakdown is None
    assert metrics.summary.revenue == Decimal("0")
    assert metrics.summary.total_expenses_actual == Decimal("1300")
    assert metrics.summary.gross_profit_actual == Decimal("-1300")
    assert metrics.summary.profit_margin_actual == Decimal("0")
    assert metrics.summary.profit_margin_projected == Decimal("0")


def test_monthly_breakdown_adds_up_to_the_year(ledger_books):
    metrics = ledger_books["finance_service"].get_dashboard_metrics(2024, as_of=AS_OF)
    rows = metrics.breakdown

    assert [row.bucket.label for row in rows][:3] == ["2024-01", "2024-02", "2024-03"]
    assert _sum(rows, "revenue") == metrics.summary.revenue
    assert _sum(rows, "total_expenses_actual") == metrics.summary.total_expenses_actual
    assert _sum(rows, "total_expenses_projected") == metrics.summary.total_expenses_projected

    by_month = {row.bucket.number: row.summary for row in rows}
    assert by_month[7].obligation_expenses_actual == Decimal("0")
    assert by_month[7].obligation_expenses_projected == Decimal("1000")
    assert by_month[9].obligation_expenses_projected == Decimal("3400")


def test_expenses_by_category_uses_actual_spend(ledger_books):
    metrics = ledger_books["finance_service"].get_dashboard_metrics(2024, as_of=AS_OF)
    categories = metrics.expenses_by_category

    assert categories == {
        "Rent": Decimal("6000"),
        "Utilities": Decimal("300"),
        "Uncategorized": Decimal("200"),
        "Insurance": Decimal("0"),
    }
    assert list(categories) == ["Rent", "Utilities", "Uncategorized", "Insurance"]


def test_project_count_skips_encoded_projects_and_other_periods(ledger_books):
    fs = ledger_books["finance_service"]

    assert fs.get_dashboard_metrics(2024, as_of=AS_OF).project_count == 1
    assert fs.get_dashboard_metrics(2023, 12, as_of=AS_OF).project_count == 1
    assert fs.get_dashboard_metrics(as_of=AS_OF).project_count == 2


def test_inactive_obligations_are_ignored(ledger_books):
    metrics = ledger_books["finance_service"].get_dashboard_metrics(2024, as_of=AS_OF)
    assert metrics.active_obligation_count == 2


def test_all_time_spans_first_fact_year_and_breaks_down_by_year(ledger_books):
    metrics = ledger_books["finance_service"].get_dashboard_metrics(as_of=AS_OF)

    assert metrics.period.window == DateWindow(date(2023, 1, 1), date(2024, 12, 31))
    assert [row.bucket.label for row in metrics.breakdown] == ["2024", "2023"]

    summary = metrics.summary
    assert summary.revenue == Decimal("19000")
    assert summary.obligation_expenses_actual == Decimal("18000")
    assert summary.obligation_expenses_projected == Decimal("26400")
    assert _sum(metrics.breakdown, "revenue") == summary.revenue
    assert _sum(metrics.breakdown, "total_expenses_actual") == summary.total_expenses_actual

    year_2023 = metrics.breakdown[1].summary
    assert year_2023.revenue == Decimal("2000")
    assert year_2023.obligation_expenses_actual == Decimal("12000")


def test_obligation_starting_in_a_later_year_extends_all_time(ledger_books):
    ledger_books["obligation_service"].create_obligation(
        "New lease", "800", "monthly", days_of_month="1", start_of_payment=date(2026, 3, 1)
    )
    metrics = ledger_books["finance_service"].get_dashboard_metrics(as_of=AS_OF)

    assert metrics.period.window.end == date(2026, 12, 31)
    assert [row.bucket.label for row in metrics.breakdown] == ["2026", "2025", "2024", "2023"]


def test_empty_books_report_zeros(services):
    metrics = services["finance_service"].get_dashboard_metrics(as_of=AS_OF)

    assert metrics.period.window == DateWindow.for_year(2024)
    assert metrics.summary.revenue == Decimal("0")
    assert metrics.summary.total_expenses_projected == Decimal("0")
    assert metrics.summary.profit_margin_actual == Decimal("0")
    assert metrics.expenses_by_category == {}
    assert metrics.project_count == 0


def test_last_supported_year_aggregates_without_overflow(services):
    from datetime import datetime

    from core.domain import Project

    services["project_repo"].add(
        Project.create("PROJ-END", "Last minute", receivable=Decimal("700"),
                       created_at=datetime(9999, 12, 31, 23, 59, 59))
    )
    services["session"].commit()
    services["obligation_service"].create_obligation("Rent", "1000", "monthly", days_of_month="1")
    fs = services["finance_service"]

    year = fs.get_dashboard_metrics(9999, as_of=AS_OF)
    december = fs.get_dashboard_metrics(9999, 12, as_of=AS_OF)

    assert year.summary.revenue == Decimal("700")
    assert year.summary.obligation_expenses_projected == Decimal("12000")
    assert year.summary.obligation_expenses_actual == Decimal("0")
    assert year.project_count == 1
    assert year.breakdown[-1].summary.revenue == Decimal("700")
    assert december.summary.revenue == Decimal("700")
    assert december.summary.obligation_expenses_projected == Decimal("1000")
