import pytest

from app import create_app
from config import TestingConfig

SHAWSHANK_ID = "dcdd0fad-a94c-4810-8acc-5f108d3b18c3"
MATRIX_ID = "c906673b-3948-4402-ac7f-73ac3a9e3105"
SEED_COUNT = 10

ALLOWED_ORIGIN = "http://localhost:8080"
FOREIGN_ORIGIN = "https://evil.example"


class EmptyConfig(TestingConfig):
    SEED_FILE = ""


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    with app.app_context():
        yield app.extensions["movie_store"]


@pytest.fixture
def empty_store():
    app = create_app(EmptyConfig)
    with app.app_context():
        yield app.extensions["movie_store"]


@pytest.fixture
def new_movie():
    return {
        "title": "Arrival",
        "year": 2016,
        "director": "Denis Villeneuve",
        "duration": 116,
        "genre": ["drama", "sci-fi"],
    }
