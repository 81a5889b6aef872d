"""Application service: Show Dashboard use case (query)."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from storefront.application.dto import DailySales, DashboardDTO
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository

RECENT_ORDERS = 5
SALES_WINDOW_DAYS = 7


class ShowDashboardHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, today: date | None = None) -> DashboardDTO:
        """Summarize sales; *today* defaults to the current UTC date.

        Sales figures add up the totals the orders were placed with.
        """
        today = today or datetime.now(timezone.utc).date()
        orders = self._order_repo.list_all()  # newest first

        total_sales = Money.zero()
        by_day: dict[date, Money] = {}
        for order in orders:
            amount = Money.of(order.total)
            total_sales = total_sales + amount
            day = order.created_at.date()
            by_day[day] = by_day.get(day, Money.zero()) + amount

        window = [today - timedelta(days=offset) for offset in range(SALES_WINDOW_DAYS - 1, -1, -1)]
        return DashboardDTO(
            total_sales=total_sales.to_text(),
            total_orders=len(orders),
            today_orders=sum(1 for order in orders if order.created_at.date() == today),
            recent_orders=orders[:RECENT_ORDERS],
            daily_sales=[
                DailySales(day=day.isoformat(), sales=by_day.get(day, Money.zero()).to_text())
                for day in window
            ],
        )
