import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import Base, SessionLocal, get_db
from main import app
from models.tag import Tag
from models.user import User
from models.vocabulary import Vocabulary


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.state.session_factory = session_factory
    yield TestClient(app)
    app.dependency_overrides.clear()
    app.state.session_factory = SessionLocal


@pytest.fixture
def user(db):
    entity = User(email="learner@example.com", name="Learner", password_hash="not-a-real-hash")
    db.add(entity)
    db.commit()
    db.refresh(entity)
    return entity


@pytest.fixture
def other_user(db):
    entity = User(email="someone@example.com", password_hash="not-a-real-hash")
    db.add(entity)
    db.commit()
    db.refresh(entity)
    return entity


@pytest.fixture
def headers(user):
    return {"X-User-Id": str(user.id)}


@pytest.fixture
def vocabulary(db, user):
    entity = Vocabulary(user_id=user.id, word="serendipity", definition="a happy accident")
    db.add(entity)
    db.commit()
    db.refresh(entity)
    return entity


@pytest.fixture
def tag(db, user):
    entity = Tag(user_id=user.id, name="travel", color="#ff8800")
    db.add(entity)
    db.commit()
    db.refresh(entity)
    return entity
