import uuid
from urllib.parse import urlparse

from flask.testing import FlaskClient

AUTHORS = [
    {"firstName": "Jane", "lastName": "Austen", "dateOfBirth": "1775-12-16", "genre": "Romance"},
    {"firstName": "Agatha", "lastName": "Christie", "dateOfBirth": "1890-09-15", "genre": "Crime"},
]


def test_create_author_collection(client: FlaskClient) -> None:
    response = client.post("/api/authorcollections", json=AUTHORS)
    assert response.status_code == 201
    created = response.get_json()
    assert [author["name"] for author in created] == ["Jane Austen", "Agatha Christie"]

    location = urlparse(response.headers["Location"]).path
    assert location.startswith("/api/authorcollections/(")
    fetched = client.get(location).get_json()
    assert sorted(author["id"] for author in fetched) == sorted(author["id"] for author in created)


def test_create_author_collection_invalid(client: FlaskClient) -> None:
    assert client.post("/api/authorcollections", json=AUTHORS[0]).status_code == 400
    assert client.post("/api/authorcollections", json=[{"firstName": "Jane"}]).status_code == 422
    # nothing was created
    assert client.get("/api/authors", query_string={"searchQuery": "austen"}).get_json() == []


def test_get_author_collection(client: FlaskClient, king_id: uuid.UUID) -> None:
    response = client.get(f"/api/authorcollections/({king_id})")
    assert response.status_code == 200
    assert [author["name"] for author in response.get_json()] == ["Stephen King"]


def test_get_author_collection_missing_author(client: FlaskClient, king_id: uuid.UUID) -> None:
    assert client.get(f"/api/authorcollections/({king_id},{uuid.uuid4()})").status_code == 404


def test_get_author_collection_malformed_ids(client: FlaskClient, king_id: uuid.UUID) -> None:
    assert client.get(f"/api/authorcollections/({king_id},abc)").status_code == 400
    assert client.get("/api/authorcollections/( )").status_code == 400
