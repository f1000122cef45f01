# app/repositories/stats_repo.py
from datetime import datetime

from sqlmodel import Session, select

from app.models.stats import DailyStats


class StatsRepository:
    """
    Data access layer for the daily_stats rollup table.

    NOTE:
      - No commits here; the read-modify-write of a day row is one
        transaction owned by StatsService.
    """

    def get_by_day(
        self,
        session: Session,
        day: datetime,
        for_update: bool = False,
    ) -> DailyStats | None:
        """
        Return the row keyed by `day` (local midnight), or None.

        `for_update=True` locks the row until commit on databases that
        support SELECT ... FOR UPDATE (ignored by SQLite).
        """
        stmt = select(DailyStats).where(DailyStats.date == day)
        if for_update:
            stmt = stmt.with_for_update()
        return session.exec(stmt).first()

    def save(self, session: Session, stats: DailyStats) -> DailyStats:
        """
        Insert or update a row without committing; flushes so unique-key
        collisions surface here rather than at commit.
        """
        session.add(stats)
        session.flush()
        return stats
