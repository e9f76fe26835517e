from datetime import datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.database import utcnow
from core.logger import get_logger
from models.api_usage import ApiUsage
from repositories.api_usage_repo import ApiUsageRepository

logger = get_logger("usage", prefix="[API_USAGE]")


def day_bucket(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


class UsageService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ApiUsageRepository(db)

    def record(self, endpoint: str, now: datetime | None = None) -> bool:
        """Count one call of ``endpoint``; a failing counter never fails the request."""
        try:
            self.repo.increment(endpoint=endpoint, day=day_bucket(now or utcnow()))
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("could not record usage for %s", endpoint)
            return False
        return True

    def list(self, *, days: int | None = None) -> list[ApiUsage]:
        since = day_bucket(utcnow()) - timedelta(days=days - 1) if days else None
        return self.repo.list_since(since=since)
