import pytest

from scorekeeper import create_app, get_state
from scorekeeper.course import Course, Player


@pytest.fixture
def pars():
    return (4, 4, 3, 5, 4, 4, 3, 5, 4, 4, 4, 3, 5, 4, 4, 3, 5, 4)


@pytest.fixture
def alex_strokes():
    return [5, 4, 3, 6, 4, 5, 3, 4, 4, 5, 4, 3, 6, 4, 4, 3, 5, 4]


@pytest.fixture
def course(pars):
    return Course(name="Municipal", pars=pars)


@pytest.fixture
def alex():
    return Player(name="Alex")


@pytest.fixture
def app():
    app = create_app({"TESTING": True, "SECRET_KEY": "test", "SEED_DEFAULT_COURSE": False})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def state(app):
    return get_state(app)
