import datetime

import pytest

from libra.dtos import AuthorForCreationDto, BookForCreationDto, BookForUpdateDto, parse_date
from libra.errors import UnprocessableEntityError, ValidationError


def test_book_for_creation() -> None:
    book = BookForCreationDto.from_payload({"Title": "Wool", "description": "Silo series"}).validate()
    assert book == BookForCreationDto(title="Wool", description="Silo series")


def test_book_for_creation_without_title() -> None:
    with pytest.raises(UnprocessableEntityError) as exc_info:
        BookForCreationDto.from_payload({"description": "Silo series"})
    assert exc_info.value.status_code == 422


def test_book_description_must_differ_from_title() -> None:
    with pytest.raises(UnprocessableEntityError):
        BookForCreationDto.from_payload({"title": "Wool", "description": "Wool"}).validate()


def test_book_title_length() -> None:
    with pytest.raises(UnprocessableEntityError):
        BookForCreationDto.from_payload({"title": "x" * 101})
    assert BookForCreationDto.from_payload({"title": "x" * 100}).title == "x" * 100


def test_book_payload_must_be_an_object() -> None:
    with pytest.raises(ValidationError) as exc_info:
        BookForCreationDto.from_payload(["Wool"])
    assert exc_info.value.status_code == 400


def test_book_title_must_be_a_string() -> None:
    with pytest.raises(ValidationError) as exc_info:
        BookForCreationDto.from_payload({"title": 42})
    assert exc_info.value.status_code == 400


def test_book_for_update_requires_a_description() -> None:
    with pytest.raises(UnprocessableEntityError):
        BookForUpdateDto.from_payload({"title": "Wool"})


def test_apply_patch_replace() -> None:
    book = BookForUpdateDto(title="Wool", description="Silo series")
    book.apply_patch([{"op": "replace", "path": "/description", "value": "First part of the Silo series"}]).validate()
    assert book == BookForUpdateDto(title="Wool", description="First part of the Silo series")


def test_apply_patch_remove_resets_the_field() -> None:
    book = BookForUpdateDto(title="Wool", description="Silo series")
    book.apply_patch([{"op": "remove", "path": "/description"}])
    assert book.description is None
    with pytest.raises(UnprocessableEntityError):
        book.validate()


def test_apply_patch_copy_and_test() -> None:
    book = BookForUpdateDto(title="Wool", description="Silo series")
    book.apply_patch(
        [
            {"op": "test", "path": "/title", "value": "Wool"},
            {"op": "copy", "from": "/title", "path": "/description"},
            {"op": "replace", "path": "/title", "value": "Shift"},
        ]
    )
    assert book == BookForUpdateDto(title="Shift", description="Wool")


@pytest.mark.parametrize(
    "operations",
    [
        {"description": "a json object is not a patch document"},
        ["replace"],
        [{"op": "replace", "path": "/isbn", "value": "123"}],
        [{"op": "add", "path": "/isbn", "value": "123"}],
        [{"op": "replace", "path": "description", "value": "no leading slash"}],
        [{"op": "rename", "path": "/title", "value": "Shift"}],
        [{"op": "test", "path": "/title", "value": "Dust"}],
        [{"op": "replace", "path": "/title", "value": 42}],
        [{"op": "replace", "path": "", "value": "Wool"}],
    ],
)
def test_apply_patch_invalid(operations) -> None:
    with pytest.raises(ValidationError) as exc_info:
        BookForUpdateDto(title="Wool", description="Silo series").apply_patch(operations)
    assert exc_info.value.status_code == 400


def test_patched_blank_book_needs_a_description() -> None:
    book = BookForUpdateDto.blank().apply_patch([{"op": "add", "path": "/title", "value": "Wool"}])
    assert book.title == "Wool"
    with pytest.raises(UnprocessableEntityError):
        book.validate()


def test_author_for_creation() -> None:
    payload = {
        "firstName": "Hugh",
        "LASTNAME": "Howey",
        "dateOfBirth": "1975-04-15T00:00:00+00:00",
        "genre": "Science fiction",
        "books": [{"title": "Wool", "description": "Silo series"}],
    }
    author = AuthorForCreationDto.from_payload(payload)
    assert author.first_name == "Hugh"
    assert author.last_name == "Howey"
    assert author.date_of_birth == datetime.date(1975, 4, 15)
    assert author.date_of_death is None
    assert author.books == [BookForCreationDto(title="Wool", description="Silo series")]


def test_author_for_creation_missing_values() -> None:
    with pytest.raises(UnprocessableEntityError):
        AuthorForCreationDto.from_payload({"firstName": "Hugh", "lastName": "Howey", "genre": "Science fiction"})
    with pytest.raises(UnprocessableEntityError):
        AuthorForCreationDto.from_payload({"firstName": "Hugh", "dateOfBirth": "1975-04-15", "genre": "Science fiction"})


def test_author_death_before_birth() -> None:
    payload = {"firstName": "a", "lastName": "b", "genre": "c", "dateOfBirth": "1975-04-15", "dateOfDeath": "1970-01-01"}
    with pytest.raises(UnprocessableEntityError):
        AuthorForCreationDto.from_payload(payload)


def test_parse_date() -> None:
    assert parse_date("2001-05-11") == datetime.date(2001, 5, 11)
    assert parse_date(None) is None
    with pytest.raises(ValidationError) as exc_info:
        parse_date("11/05/2001", "dateOfDeath")
    assert exc_info.value.status_code == 400
