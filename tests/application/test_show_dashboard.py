"""Tests for the ShowDashboard query."""

from datetime import date, datetime, timedelta, timezone

from storefront.application.show_dashboard import ShowDashboardHandler
from storefront.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from tests.fakes import order_input

TODAY = date(2026, 10, 19)


def _at(days_ago: int, hour: int = 10) -> datetime:
    day = TODAY - timedelta(days=days_ago)
    return datetime(day.year, day.month, day.day, hour, tzinfo=timezone.utc)


def _repo_with(orders: list[tuple[datetime, str]]) -> InMemoryOrderRepository:
    stamps = iter([when for when, _ in orders])
    repo = InMemoryOrderRepository(clock=lambda: next(stamps))
    for _, total in orders:
        repo.create(order_input(total=total))
    return repo


class TestDashboard:

    def test_empty_store(self):
        dto = ShowDashboardHandler(InMemoryOrderRepository()).handle(today=TODAY)
        assert dto.total_sales == "0.00"
        assert dto.total_orders == 0
        assert dto.today_orders == 0
        assert dto.recent_orders == []
        assert len(dto.daily_sales) == 7
        assert all(day.sales == "0.00" for day in dto.daily_sales)

    def test_totals(self):
        repo = _repo_with([(_at(3), "100"), (_at(0, 9), "25.50"), (_at(0, 11), "4.50")])
        dto = ShowDashboardHandler(repo).handle(today=TODAY)

        assert dto.total_sales == "130.00"
        assert dto.total_orders == 3
        assert dto.today_orders == 2

    def test_daily_series_runs_oldest_to_today(self):
        repo = _repo_with([(_at(6), "10"), (_at(0), "20"), (_at(30), "999")])
        dto = ShowDashboardHandler(repo).handle(today=TODAY)

        assert dto.daily_sales[0].day == "2026-10-13"
        assert dto.daily_sales[0].sales == "10.00"
        assert dto.daily_sales[-1].day == "2026-10-19"
        assert dto.daily_sales[-1].sales == "20.00"
        # older orders count toward total sales but fall outside the chart
        assert dto.total_sales == "1029.00"

    def test_recent_orders_are_newest_five(self):
        repo = _repo_with([(_at(10 - i), str(i)) for i in range(8)])
        dto = ShowDashboardHandler(repo).handle(today=TODAY)

        assert [o.total for o in dto.recent_orders] == ["7", "6", "5", "4", "3"]

    def test_large_totals_still_render(self):
        repo = _repo_with([(_at(0), "900000000000000000") for _ in range(20)])
        dto = ShowDashboardHandler(repo).handle(today=TODAY)

        assert dto.total_sales == "18000000000000000000.00"
        assert dto.daily_sales[-1].sales == "18000000000000000000.00"
