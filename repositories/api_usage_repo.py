from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.api_usage import ApiUsage


class ApiUsageRepository:
    def __init__(self, db: Session):
        self.db = db

    def increment(self, *, endpoint: str, day: datetime) -> None:
        stmt = (
            update(ApiUsage)
            .where(ApiUsage.endpoint == endpoint, ApiUsage.date == day)
            .values(count=ApiUsage.count + 1)
        )
        if self.db.execute(stmt).rowcount:
            self.db.commit()
            return

        self.db.add(ApiUsage(endpoint=endpoint, date=day, count=1))
        try:
            self.db.commit()
        except IntegrityError:
            # another request created the row first
            self.db.rollback()
            self.db.execute(stmt)
            self.db.commit()

    def list_since(self, *, since: datetime | None = None) -> list[ApiUsage]:
        stmt = select(ApiUsage).order_by(ApiUsage.date.desc(), ApiUsage.endpoint)
        if since is not None:
            stmt = stmt.where(ApiUsage.date >= since)
        return list(self.db.execute(stmt).scalars())
