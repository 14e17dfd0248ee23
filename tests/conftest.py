import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Engine SQLite pour tests AVANT d'importer l'app
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///./test.db"
test_engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

# PATCH: remplacer engine et SessionLocal AVANT d'importer l'app
import todo_app.core.database
todo_app.core.database.engine = test_engine
todo_app.core.database.SessionLocal = TestingSessionLocal

from todo_app.core.database import Base, get_db
from todo_app.main import app
from todo_app.client.api import TodoApiClient
from todo_app.client.store import TodoStore

def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)

app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def client():
    """Client de test FastAPI"""
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    db = TestingSessionLocal()
    yield db
    db.close()


class RecordingSession:
    """Délègue au TestClient en gardant la trace des requêtes envoyées."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    def __getattr__(self, method):
        send = getattr(self.inner, method)

        def wrapper(url, **kwargs):
            self.calls.append((method.upper(), url))
            return send(url, **kwargs)
        return wrapper


@pytest.fixture
def http(client):
    return RecordingSession(client)


@pytest.fixture
def api(http):
    """Client API branché sur l'app en mémoire"""
    return TodoApiClient(base_url="http://testserver", session=http)


@pytest.fixture
def store(api):
    return TodoStore(api)
