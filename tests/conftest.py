import uuid
from typing import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from libra import DB
from libra.app import create_app
from libra.models import Author


@pytest.fixture
def app() -> Iterator[Flask]:
    app = create_app({"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite://", "LIBRA_SEED": True})
    yield app
    with app.app_context():
        DB.session.remove()
        DB.drop_all()


@pytest.fixture
def empty_app() -> Iterator[Flask]:
    app = create_app({"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite://"})
    yield app
    with app.app_context():
        DB.session.remove()
        DB.drop_all()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def author_id(app: Flask, last_name: str) -> uuid.UUID:
    with app.app_context():
        return DB.session.query(Author).filter_by(last_name=last_name).one().id


@pytest.fixture
def king_id(app: Flask) -> uuid.UUID:
    return author_id(app, "King")
