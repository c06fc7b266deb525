import uuid

import pytest
from flask import Flask

from libra import current_libra
from libra.errors import SystemValidationError
from libra.uri_builder import FlaskUriBuilder, clean_params


@pytest.fixture
def builder(empty_app: Flask):
    with empty_app.test_request_context():
        yield FlaskUriBuilder(current_libra().api.routes)


def test_clean_params() -> None:
    assert clean_params({"a": None, "b": "", "c": 0, "d": "x"}) == {"c": 0, "d": "x"}
    assert clean_params(None) == {}


def test_build_omits_empty_values(builder: FlaskUriBuilder) -> None:
    href = builder.build("GetAuthors", {"searchQuery": None, "genre": "", "pageNumber": 2})
    assert href == "http://localhost/api/authors?pageNumber=2"


def test_build_is_deterministic(builder: FlaskUriBuilder) -> None:
    params = {"orderBy": "Name", "pageNumber": 1, "pageSize": 10}
    assert builder.build("GetAuthors", params) == builder.build("GetAuthors", dict(params))


def test_build_resource_uri(builder: FlaskUriBuilder) -> None:
    author_id = uuid.uuid4()
    book_id = uuid.uuid4()
    assert builder.build("GetAuthor", {"author_id": author_id}) == f"http://localhost/api/authors/{author_id}"
    assert builder.build("UpdateBookForAuthor", {"author_id": author_id, "book_id": book_id}).endswith(
        f"/api/authors/{author_id}/books/{book_id}"
    )


def test_build_author_collection_uri(builder: FlaskUriBuilder) -> None:
    href = builder.build("GetAuthorCollection", {"ids": "a,b"})
    assert "/api/authorcollections/(" in href


def test_unknown_route(builder: FlaskUriBuilder) -> None:
    with pytest.raises(SystemValidationError):
        builder.build("GetPublishers", {})


def test_missing_route_value(builder: FlaskUriBuilder) -> None:
    with pytest.raises(SystemValidationError):
        builder.build("GetAuthor", {})
