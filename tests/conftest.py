"""Pytest fixtures for the bookshelf collection API."""

import pytest

from bookshelf import create_app, db
from bookshelf.models.book import Book
from bookshelf.models.collection import Collection
from bookshelf.models.user import User

PASSWORD = "password123"


def seed():
    """Two users and three books."""
    reader = User(username="reader", email="reader@example.com", name="Avid Reader")
    reader.set_password(PASSWORD)
    other = User(username="other", email="other@example.com", name="Other Reader")
    other.set_password(PASSWORD)
    db.session.add_all([reader, other])

    db.session.add_all([
        Book(title="Dune", author="Frank Herbert", isbn="978-0441013593"),
        Book(title="Emma", author="Jane Austen"),
        Book(title="Ulysses", author="James Joyce"),
    ])
    db.session.commit()


@pytest.fixture
def app():
    """App on a fresh in-memory database."""
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        seed()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Anonymous test client."""
    return app.test_client()


@pytest.fixture
def auth_client(app):
    """Test client with a logged-in session for 'reader'."""
    client = app.test_client()
    resp = client.post("/api/auth/login", json={"username": "reader", "password": PASSWORD})
    assert resp.status_code == 200
    return client


@pytest.fixture
def ids(app):
    """Primary keys of the seeded rows."""
    with app.app_context():
        return {
            "reader": User.query.filter_by(username="reader").one().id,
            "other": User.query.filter_by(username="other").one().id,
            "dune": Book.query.filter_by(title="Dune").one().id,
            "emma": Book.query.filter_by(title="Emma").one().id,
            "ulysses": Book.query.filter_by(title="Ulysses").one().id,
        }


@pytest.fixture
def add_collection(app):
    """Insert a collection row directly and return its id."""

    def _add(user_id, book_id):
        with app.app_context():
            collection = Collection(user_id=user_id, book_id=book_id)
            db.session.add(collection)
            db.session.commit()
            return collection.id

    return _add


@pytest.fixture
def collection_count(app):
    """Number of collection rows currently stored."""

    def _count():
        with app.app_context():
            return Collection.query.count()

    return _count
