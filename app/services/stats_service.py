# app/services/stats_service.py
import logging
import threading
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any, Callable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from app.core.errors import PersistenceError, ValidationError
from app.models.stats import DailyStats, empty_category_stats, empty_hourly_stats
from app.repositories.stats_repo import StatsRepository
from app.schemas.stats import DashboardStats, TopProduct
from app.services.sales_buckets import classify

logger = logging.getLogger(__name__)

TOP_PRODUCTS_LIMIT = 10

ORDER_TYPE_DINE_IN = "Dine In"
ORDER_TYPE_TAKE_OUT = "Take Out"

# One lock per day key: two tills paying at the same moment must not
# both read the same row and overwrite each other's increments.
_day_locks: dict[datetime, threading.Lock] = {}
_day_locks_guard = threading.Lock()


def day_key(moment: datetime) -> datetime:
    """Local midnight of the calendar day `moment` falls on."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _lock_for(day: datetime) -> threading.Lock:
    with _day_locks_guard:
        lock = _day_locks.get(day)
        if lock is None:
            # Keep only today and yesterday around
            for stale in [d for d in _day_locks if d < day - timedelta(days=1)]:
                del _day_locks[stale]
            lock = _day_locks[day] = threading.Lock()
        return lock


def rank_top_products(
    current: list[dict[str, Any]],
    items: list[tuple[str, int]],
    limit: int = TOP_PRODUCTS_LIMIT,
) -> list[dict[str, Any]]:
    """
    Merge an order's line items into the top-products list.

    Items are matched by exact name; unknown names are appended.
    The result is sorted by quantity descending (ties keep their
    previous order) and cut to `limit` entries, so a product that
    falls off the list starts again from zero if it comes back.
    """
    ranked = [{"name": p["name"], "quantity": p["quantity"]} for p in current]
    by_name = {p["name"]: p for p in ranked}

    for name, quantity in items:
        entry = by_name.get(name)
        if entry is None:
            entry = {"name": name, "quantity": quantity}
            ranked.append(entry)
            by_name[name] = entry
        else:
            entry["quantity"] += quantity

    ranked.sort(key=lambda p: p["quantity"], reverse=True)
    return ranked[:limit]


class StatsService:
    """
    Daily sales rollup: incremental update on every paid order and the
    read path for the dashboard.

    Responsibilities:
      - lazily create today's row, carrying cumulative counters forward
        from yesterday's row
      - apply one order's increments (counts, items, order type, hour,
        sales buckets, top products)
      - serialise updates per day key
      - project today's row for the dashboard (zeroed if absent)
    """

    def __init__(
        self,
        repo: StatsRepository,
        clock: Callable[[], datetime] = datetime.now,
        top_products_limit: int = TOP_PRODUCTS_LIMIT,
    ):
        self.repo = repo
        self.clock = clock
        self.top_products_limit = top_products_limit

    # -------- Write path --------

    def update_stats(
        self,
        session: Session,
        order_payload: Mapping[str, Any],
    ) -> DailyStats:
        """
        Apply one paid order to today's rollup row and commit it.

        Args:
            order_payload: {"items": [{"name", "quantity", ...}], "type": str}

        Returns:
            The persisted DailyStats row.

        Raises:
            ValidationError: if items are missing or malformed.
            PersistenceError: if the database read/write fails.
        """
        items = self._validated_items(order_payload)
        order_type = order_payload.get("type")

        while True:
            day = day_key(self.clock())
            with _lock_for(day):
                # The order is booked at the time the lock is held
                now = self.clock()
                if day_key(now) != day:
                    logger.info("Midnight passed while waiting on %s, rebooking", day.date())
                    continue
                return self._commit_order(session, day, now, items, order_type)

    def _commit_order(
        self,
        session: Session,
        day: datetime,
        now: datetime,
        items: list[tuple[str, int]],
        order_type: Any,
    ) -> DailyStats:
        for attempt in (1, 2):
            try:
                stats = self._apply_order(session, day, now, items, order_type)
                session.commit()
                session.refresh(stats)
                return stats
            except IntegrityError as exc:
                session.rollback()
                if attempt == 2:
                    raise PersistenceError(
                        f"Could not create stats row for {day.date()}"
                    ) from exc
                # Another worker inserted today's row first; update it instead.
                logger.info(
                    "Stats row for %s created concurrently, retrying",
                    day.date(),
                )
            except SQLAlchemyError as exc:
                session.rollback()
                raise PersistenceError("Failed to update daily stats") from exc

    def _apply_order(
        self,
        session: Session,
        day: datetime,
        now: datetime,
        items: list[tuple[str, int]],
        order_type: Any,
    ) -> DailyStats:
        stats = self.repo.get_by_day(session, day, for_update=True)
        if stats is None:
            yesterday = self.repo.get_by_day(session, day - timedelta(days=1))
            stats = self._new_day(day, yesterday)
            logger.info(
                "Opening stats row for %s (carry-forward from %s)",
                day.date(),
                yesterday.date.date() if yesterday else "nothing",
            )

        items_in_order = sum(quantity for _, quantity in items)

        stats.total_orders += 1
        stats.orders_today += 1
        stats.items_sold += items_in_order
        stats.items_sold_today += items_in_order

        if order_type == ORDER_TYPE_DINE_IN:
            stats.dine_in_orders += 1
        elif order_type == ORDER_TYPE_TAKE_OUT:
            stats.takeout_orders += 1

        hourly = dict(stats.hourly_stats)
        hour = str(now.hour)
        hourly[hour] = hourly.get(hour, 0) + 1
        stats.hourly_stats = hourly

        category_stats = dict(stats.category_stats)
        for name, quantity in items:
            bucket = classify(name)
            if bucket is not None:
                category_stats[bucket] = category_stats.get(bucket, 0) + quantity
        stats.category_stats = category_stats

        stats.top_products = rank_top_products(
            stats.top_products, items, self.top_products_limit
        )

        stats.last_updated = now
        return self.repo.save(session, stats)

    @staticmethod
    def _new_day(day: datetime, previous: DailyStats | None) -> DailyStats:
        """
        Build a fresh row for `day`. Cumulative counters are copied from
        `previous` when there is one; daily counters always start at 0.
        """
        if previous is None:
            return DailyStats(date=day)

        return DailyStats(
            date=day,
            total_orders=previous.total_orders,
            items_sold=previous.items_sold,
            dine_in_orders=previous.dine_in_orders,
            takeout_orders=previous.takeout_orders,
            category_stats={**empty_category_stats(), **previous.category_stats},
            hourly_stats={**empty_hourly_stats(), **previous.hourly_stats},
            top_products=[dict(p) for p in previous.top_products],
        )

    @staticmethod
    def _validated_items(order_payload: Mapping[str, Any]) -> list[tuple[str, int]]:
        """
        Reduce the payload's line items to (name, quantity) pairs.

        Raises:
            ValidationError: on an empty/missing item list, a missing
            name, or a quantity that is not a positive integer.
        """
        raw_items = order_payload.get("items")
        if not isinstance(raw_items, list) or not raw_items:
            raise ValidationError("Order has no items")

        items: list[tuple[str, int]] = []
        for position, item in enumerate(raw_items):
            if not isinstance(item, Mapping):
                raise ValidationError(f"Item {position} is not an object")

            name = item.get("name")
            if not isinstance(name, str) or not name:
                raise ValidationError(f"Item {position} has no name")

            quantity = item.get("quantity")
            if isinstance(quantity, bool) or not isinstance(quantity, int):
                raise ValidationError(f"Item {position} ({name}) has no valid quantity")
            if quantity <= 0:
                raise ValidationError(f"Item {position} ({name}) quantity must be positive")

            items.append((name, quantity))
        return items

    # -------- Read path --------

    def get_dashboard_stats(self, session: Session) -> DashboardStats:
        """
        Today's rollup shaped for the dashboard.

        No row yet today -> all-zero defaults (same shape, empty lists).
        A database failure is raised, never replaced by the defaults.

        Raises:
            PersistenceError: if the database read fails.
        """
        try:
            stats = self.repo.get_by_day(session, day_key(self.clock()))
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to load daily stats") from exc

        if stats is None:
            return DashboardStats()

        return DashboardStats(
            total_orders=stats.total_orders,
            total_products=len(stats.top_products),
            total_stocks=stats.items_sold,
            orders_today=stats.orders_today,
            items_sold_today=stats.items_sold_today,
            dine_in_today=stats.dine_in_orders,
            takeout_today=stats.takeout_orders,
            category_stats=dict(stats.category_stats),
            hourly_stats=dict(stats.hourly_stats),
            top_products=[TopProduct(**p) for p in stats.top_products],
        )
