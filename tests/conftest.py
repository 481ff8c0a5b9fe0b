# tests/conftest.py

import pytest

from app import create_app
from models import HOUR_MS, Chore, ChoreConfig, InstanceData

NOW = 1_700_000_000_000


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'kinobi-test.db'}",
        "APP_VERSION": "v-test",
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def config():
    return ChoreConfig(warning_threshold=75, urgent_threshold=90)


@pytest.fixture
def instance():
    return InstanceData(chores=[
        Chore(id="chore_dishes", name="Dishes", icon="🍽️", cycle_duration=24, points=10),
        Chore(id="chore_trash", name="Trash", icon="🗑️", cycle_duration=72, points=25),
    ])


@pytest.fixture
def tended_chore(now):
    """Factory for a chore last tended ``elapsed_hours`` before ``now``."""
    def make(cycle_hours, elapsed_hours):
        last = now - int(elapsed_hours * HOUR_MS)
        return Chore(
            id="chore_x", name="X", icon="x", cycle_duration=cycle_hours, points=10,
            last_completed=last, due_date=last + int(cycle_hours * HOUR_MS),
        )
    return make
