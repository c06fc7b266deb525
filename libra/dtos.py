#
# Data transfer objects
#
# Output shapes (AuthorDto, BookDto) are shaped with `shape_data`,
# input shapes are parsed from the json request payloads with `from_payload`.
# Payload keys are camelCase and matched case-insensitively.
#
import datetime
import uuid
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional
import jsonpatch
import jsonpointer
from .errors import UnprocessableEntityError, ValidationError
from .shapes import Shape, shape_field
from .util import lower_keys

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
NAME_MAX_LENGTH = 50
DATE_FORMAT = "%Y-%m-%d"


@dataclass
class AuthorDto(Shape):
    id: uuid.UUID
    name: str
    age: int
    genre: str


@dataclass
class BookDto(Shape):
    id: uuid.UUID
    title: str
    description: Optional[str]
    author_id: uuid.UUID = shape_field(name="authorId")


#
# Payload parsing helpers
#
def _payload_dict(payload: Any, name: str) -> dict:
    if not isinstance(payload, Mapping):
        raise ValidationError(f"Invalid {name} payload: a json object is expected")
    return lower_keys(payload.items())


def _get_str(data: dict, key: str, required: bool = False, max_length: Optional[int] = None) -> Optional[str]:
    value = data.get(key.lower(), None)
    if value is None:
        if required:
            raise UnprocessableEntityError(f"{key} is required")
        return None
    if not isinstance(value, str):
        raise ValidationError(f'Invalid {key} "{value}": a string is expected')
    if required and not value.strip():
        raise UnprocessableEntityError(f"{key} is required")
    if max_length is not None and len(value) > max_length:
        raise UnprocessableEntityError(f"{key} shouldn't have more than {max_length} characters")
    return value


def parse_date(value: Any, key: str = "date") -> Optional[datetime.date]:
    """
    :param value: "YYYY-MM-DD", a longer iso timestamp is truncated to its date
    :return: datetime.date or None
    """
    if value is None:
        return None
    try:
        return datetime.datetime.strptime(str(value)[:10], DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f'Invalid {key} "{value}", expected format YYYY-MM-DD')


def _validate_book(title: Optional[str], description: Optional[str]) -> None:
    if description == title:
        raise UnprocessableEntityError("The provided description should be different from the title.")


@dataclass
class BookForCreationDto(Shape):
    title: str
    description: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "BookForCreationDto":
        data = _payload_dict(payload, "book")
        return cls(
            title=_get_str(data, "title", required=True, max_length=TITLE_MAX_LENGTH),
            description=_get_str(data, "description", max_length=DESCRIPTION_MAX_LENGTH),
        )

    def validate(self) -> "BookForCreationDto":
        _validate_book(self.title, self.description)
        return self


@dataclass
class BookForUpdateDto(Shape):
    """
    Full book update (PUT) or the target of a json patch document (PATCH),
    the description is required for updates
    """

    title: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "BookForUpdateDto":
        data = _payload_dict(payload, "book")
        return cls(
            title=_get_str(data, "title", required=True, max_length=TITLE_MAX_LENGTH),
            description=_get_str(data, "description", required=True, max_length=DESCRIPTION_MAX_LENGTH),
        )

    @classmethod
    def blank(cls) -> "BookForUpdateDto":
        """
        :return: empty update, patched when upserting a book with PATCH
        """
        return cls()

    def apply_patch(self, operations: Any) -> "BookForUpdateDto":
        """
        Apply a json patch document (RFC 6902) to this dto
        :param operations: e.g. [{"op": "replace", "path": "/description", "value": "new description"}]
        :return: self

        The paths address the client field names ("/title", "/description"). A removed field is
        reset to None, the result is checked with `validate` by the caller.
        """
        if not isinstance(operations, list) or not all(isinstance(op, Mapping) for op in operations):
            raise ValidationError("Invalid patch payload: a json patch document (list of operations) is expected")

        document = {field.name: getattr(self, field.attr) for field in self._s_fields.values()}
        try:
            patched = jsonpatch.JsonPatch(operations).apply(document)
        except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException, TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid patch: {exc}")

        if not isinstance(patched, Mapping):
            raise ValidationError("Invalid patch: the book can't be replaced as a whole")
        for key in patched:
            if self.get_field(key) is None:
                raise ValidationError(f'Invalid patch: unknown path "/{key}"')

        self.title = _get_str(patched, "title", max_length=TITLE_MAX_LENGTH)
        self.description = _get_str(patched, "description", max_length=DESCRIPTION_MAX_LENGTH)
        return self

    def validate(self) -> "BookForUpdateDto":
        if not self.title or not self.title.strip():
            raise UnprocessableEntityError("title is required")
        if not self.description or not self.description.strip():
            raise UnprocessableEntityError("You should fill out a description.")
        _validate_book(self.title, self.description)
        return self


@dataclass
class AuthorForCreationDto(Shape):
    first_name: str = shape_field(name="firstName")
    last_name: str = shape_field(name="lastName")
    date_of_birth: datetime.date = shape_field(name="dateOfBirth")
    genre: str = shape_field(name="genre")
    date_of_death: Optional[datetime.date] = shape_field(name="dateOfDeath", default=None)
    books: List[BookForCreationDto] = shape_field(name="books", default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "AuthorForCreationDto":
        data = _payload_dict(payload, "author")
        date_of_birth = parse_date(data.get("dateofbirth", None), "dateOfBirth")
        if date_of_birth is None:
            raise UnprocessableEntityError("dateOfBirth is required")

        books = data.get("books", None) or []
        if not isinstance(books, list):
            raise ValidationError("Invalid books: a list is expected")

        result = cls(
            first_name=_get_str(data, "firstName", required=True, max_length=NAME_MAX_LENGTH),
            last_name=_get_str(data, "lastName", required=True, max_length=NAME_MAX_LENGTH),
            date_of_birth=date_of_birth,
            genre=_get_str(data, "genre", required=True, max_length=NAME_MAX_LENGTH),
            date_of_death=parse_date(data.get("dateofdeath", None), "dateOfDeath"),
            books=[BookForCreationDto.from_payload(book).validate() for book in books],
        )
        if result.date_of_death is not None and result.date_of_death < result.date_of_birth:
            raise UnprocessableEntityError("dateOfDeath should be after dateOfBirth")
        return result
