import uuid

import pytest

from libra.dtos import AuthorDto, BookDto
from libra.errors import UnknownFieldError
from libra.shaping import ShapedRecord, has_properties, shape_data, shape_data_many

AUTHOR_ID = uuid.UUID("25320c5e-f58a-4b1f-b63a-8ee07a840bdf")
BOOK_ID = uuid.UUID("c7ba6add-09c4-45f8-8dd0-eaca221e5d93")


@pytest.fixture
def author() -> AuthorDto:
    return AuthorDto(id=AUTHOR_ID, name="Stephen King", age=75, genre="Horror")


@pytest.fixture
def book() -> BookDto:
    return BookDto(id=BOOK_ID, title="It", description="A horror novel", author_id=AUTHOR_ID)


@pytest.mark.parametrize(
    "fields, expected",
    [
        (None, True),
        ("", True),
        (" ", True),
        ("id,name", True),
        ("ID, Name ,genre", True),
        ("age", True),
        ("id,foo", False),
        ("id,,name", False),
        ("name desc", False),
    ],
)
def test_has_properties(fields, expected: bool) -> None:
    assert has_properties(AuthorDto, fields) is expected


def test_has_properties_uses_client_names() -> None:
    assert has_properties(BookDto, "authorId")
    assert has_properties(BookDto, "AUTHORID")
    assert not has_properties(BookDto, "author_id")


def test_shape_all_fields_in_declaration_order(author: AuthorDto) -> None:
    record = shape_data(author)
    assert isinstance(record, ShapedRecord)
    assert list(record) == ["id", "name", "age", "genre"]
    assert record == {"id": AUTHOR_ID, "name": "Stephen King", "age": 75, "genre": "Horror"}
    assert list(shape_data(author, "  ")) == ["id", "name", "age", "genre"]


def test_shape_requested_fields_in_requested_order(author: AuthorDto) -> None:
    record = shape_data(author, "genre, NAME")
    assert list(record.items()) == [("genre", "Horror"), ("name", "Stephen King")]


def test_shape_uses_declared_names(book: BookDto) -> None:
    assert shape_data(book, "authorid") == {"authorId": AUTHOR_ID}
    assert list(shape_data(book)) == ["id", "title", "description", "authorId"]


def test_shape_unknown_field(author: AuthorDto) -> None:
    with pytest.raises(UnknownFieldError) as exc_info:
        shape_data(author, "name,title")
    assert exc_info.value.field_name == "title"
    assert exc_info.value.shape is AuthorDto
    assert exc_info.value.status_code == 500


def test_shape_duplicate_field_keeps_first_position(author: AuthorDto) -> None:
    assert list(shape_data(author, "name,id,NAME")) == ["name", "id"]


def test_shape_include_identity(author: AuthorDto) -> None:
    assert list(shape_data(author, "name", include_identity=True)) == ["name", "id"]
    assert list(shape_data(author, "id,name", include_identity=True)) == ["id", "name"]
    assert list(shape_data(author, "name")) == ["name"]


def test_shape_many_keeps_input_order(author: AuthorDto) -> None:
    other = AuthorDto(id=uuid.uuid4(), name="Neil Gaiman", age=62, genre="Fantasy")
    records = shape_data_many([other, author, other], "name")
    assert records == [{"name": "Neil Gaiman"}, {"name": "Stephen King"}, {"name": "Neil Gaiman"}]
    assert shape_data_many([], "name") == []


def test_field_table_is_cached_per_class() -> None:
    assert AuthorDto._s_fields is AuthorDto._s_fields
    assert "authorid" in BookDto._s_fields
    assert "authorid" not in AuthorDto._s_fields
    assert BookDto.get_field(" AuthorId ").attr == "author_id"
