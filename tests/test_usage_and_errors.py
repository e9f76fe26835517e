"""
Tests for API usage tracking, error mapping and the schema definition.
"""
from datetime import datetime
from unittest.mock import MagicMock

import pytest
from sqlalchemy import inspect, select
from sqlalchemy.exc import OperationalError

from core.database import Base, init_database, utcnow
from core.errors import Conflict
from models.review import Review
from services.review_service import ReviewService
from services.usage_service import UsageService, day_bucket


def test_requests_are_counted_per_route_and_day(client, headers):
    client.post("/tags", json={"name": "one"}, headers=headers)
    client.post("/tags", json={"name": "two"}, headers=headers)
    client.get("/tags", headers=headers)

    rows = {row["endpoint"]: row["count"] for row in client.get("/usage").json()}

    assert rows["POST /tags"] == 2
    assert rows["GET /tags"] == 1


def test_path_parameters_are_grouped_by_template(client, headers, vocabulary):
    client.get(f"/vocabularies/{vocabulary.id}", headers=headers)
    client.get("/vocabularies/3fa85f64-5717-4562-b3fc-2c963f66afa6", headers=headers)

    rows = {row["endpoint"]: row["count"] for row in client.get("/usage").json()}

    assert rows["GET /vocabularies/{id}"] == 2


def test_status_is_not_counted(client):
    assert client.get("/status").json() == {"status": "ok"}
    assert client.get("/usage").json() == []


def test_usage_query_errors_use_the_validation_format(client):
    response = client.get("/usage?days=0")

    assert response.status_code == 400
    detail = response.json()["details"][0]
    assert detail["field"] == "days"
    assert detail["location"] == "query"


def test_usage_counter_failure_does_not_raise():
    db = MagicMock()
    svc = UsageService(db)
    svc.repo = MagicMock()
    svc.repo.increment.side_effect = OperationalError("UPDATE", {}, Exception("disk I/O error"))

    assert svc.record("GET /tags") is False
    db.rollback.assert_called_once()


def test_day_bucket():
    assert day_bucket(datetime(2026, 3, 4, 17, 45, 12, 99)) == datetime(2026, 3, 4)


def test_usage_rows_are_bucketed_by_day(db):
    svc = UsageService(db)
    svc.record("GET /tags", now=datetime(2026, 3, 4, 1, 0))
    svc.record("GET /tags", now=datetime(2026, 3, 4, 23, 0))
    svc.record("GET /tags", now=datetime(2026, 3, 5, 0, 30))

    rows = [(row.date, row.count) for row in svc.list()]

    assert rows == [(datetime(2026, 3, 5), 1), (datetime(2026, 3, 4), 2)]


def test_losing_the_first_review_race_is_a_conflict(db, session_factory, user, vocabulary, monkeypatch):
    user_id, vocabulary_id = user.id, vocabulary.id
    svc = ReviewService(db)
    lookup = svc.repo.get_for_vocabulary

    def concurrent_insert(**kwargs):
        existing = lookup(**kwargs)
        other = session_factory()
        try:
            other.add(Review(user_id=user_id, vocabulary_id=vocabulary_id, next_review=utcnow(), interval=1, quality=2))
            other.commit()
        finally:
            other.close()
        return existing

    monkeypatch.setattr(svc.repo, "get_for_vocabulary", concurrent_insert)

    with pytest.raises(Conflict):
        svc.submit(user_id=user_id, vocabulary_id=vocabulary_id, quality=5)

    check = session_factory()
    try:
        stored = check.execute(select(Review)).scalars().all()
        assert [(row.quality, row.interval, row.repetitions, row.last_reviewed) for row in stored] == [(2, 1, 0, None)]
    finally:
        check.close()


def test_scheduler_is_replaceable(db, user, vocabulary):
    calls = []

    def fixed(ease_factor, interval, repetitions, quality, now):
        from services.scheduler import ScheduleResult

        calls.append((ease_factor, interval, repetitions, quality))
        return ScheduleResult(ease_factor=ease_factor, interval=3, repetitions=repetitions + 1, next_review=now)

    review = ReviewService(db, scheduler=fixed).submit(user_id=user.id, vocabulary_id=vocabulary.id, quality=3)

    assert calls == [(2.5, 0, 0, 3)]
    assert review.interval == 3


def test_storage_failures_are_opaque_500s(client, headers, monkeypatch):
    def explode(self, user_id):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr("services.tag_service.TagService.list", explode)

    response = client.get("/tags", headers=headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


def test_reviews_table_constraints():
    table = Base.metadata.tables["reviews"]
    names = {constraint.name for constraint in table.constraints}
    indexes = {index.name for index in table.indexes}

    assert {"PK_reviews", "UQ_reviews_userId_vocabularyId", "FK_reviews_users_userId", "FK_reviews_vocabularies"} <= names
    assert indexes == {"IX_reviews_userId", "IX_reviews_nextReview"}
    assert [column.name for column in table.columns] == [
        "id",
        "userId",
        "vocabularyId",
        "easeFactor",
        "interval",
        "repetitions",
        "nextReview",
        "lastReviewed",
        "quality",
        "createdAt",
    ]
    assert table.c.nextReview.nullable is False
    assert table.c.lastReviewed.nullable is True
    assert table.c.quality.nullable is True


def test_init_database_creates_every_table(engine):
    Base.metadata.drop_all(bind=engine)

    assert init_database(bind=engine) is True
    assert set(inspect(engine).get_table_names()) == {
        "users",
        "sessions",
        "vocabularies",
        "tags",
        "vocabulariesTags",
        "reviews",
        "apiUsage",
    }
