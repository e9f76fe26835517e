from uuid import uuid4

from sqlalchemy import Column, DateTime, Index, Integer, PrimaryKeyConstraint, String, UniqueConstraint, Uuid, func

from core.database import Base, utcnow


class ApiUsage(Base):
    __tablename__ = "apiUsage"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="PK_apiUsage"),
        UniqueConstraint("endpoint", "date", name="UQ_apiUsage_endpoint_date"),
        Index("IX_apiUsage_endpoint", "endpoint"),
        Index("IX_apiUsage_date", "date"),
    )

    id = Column("id", Uuid, nullable=False, default=uuid4)
    endpoint = Column("endpoint", String(255), nullable=False)
    date = Column("date", DateTime, nullable=False)
    count = Column("count", Integer, nullable=False, default=0, server_default="0")
    created_at = Column("createdAt", DateTime, nullable=False, default=utcnow, server_default=func.now())
