import os

# Keep the app engine off disk; every test gets its own in-memory database below
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.connection import get_db
from database.models import Base, User, Player
from app.helpers import cache
from app.services.auth_service import get_password_hash, create_access_token
from app.services.opfw import opfw_client
from main import app


class FakeOpFwClient:
    """Stands in for the game servers: {server: players map or None}"""

    def __init__(self, servers=None):
        self.servers = servers or {}
        self.calls = []

    def fetch_steam_identifiers(self, server, use_cache=True):
        self.calls.append((server, use_cache))
        return self.servers.get(server)


def connection(source=1, character=None, fake_disconnected=False, identity_override=False, name="Player"):
    return {
        "source": source,
        "character": character,
        "fakeDisconnected": fake_disconnected,
        "identityOverride": identity_override,
        "name": name,
    }


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv("OP_FW_SERVERS", raising=False)
    monkeypatch.delenv("ROOT_STEAM_IDENTIFIERS", raising=False)
    monkeypatch.delenv("STEAM_API_KEY", raising=False)
    monkeypatch.delenv("LOGS_PER_PAGE", raising=False)
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def db_engine():
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
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def staff_player(db_session):
    player = Player(
        steam_identifier="steam:110000100000001",
        player_name="Admin",
        identifiers=["license:abc", "discord:42"],
        is_staff=True,
    )
    db_session.add(player)
    db_session.commit()
    return player


@pytest.fixture
def admin_user(db_session, staff_player):
    user = User(
        username="admin",
        hashed_password=get_password_hash("secret"),
        steam_identifier=staff_player.steam_identifier,
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def auth_headers(admin_user):
    token = create_access_token({"sub": admin_user.username})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def fake_servers(monkeypatch):
    """Replace the OP-FW client; tests fill .servers and set OP_FW_SERVERS."""
    fake = FakeOpFwClient()
    monkeypatch.setattr(opfw_client, "client", fake)
    return fake


@pytest.fixture
def make_connection():
    return connection
