#
# Translation between the database objects and the data transfer objects
#
# Converters are registered per (source type, target shape) pair with the `converter` decorator:
#
#   @converter(Author, AuthorDto)
#   def author_to_dto(author):
#       ...
#
#   dto = translate(author, AuthorDto)
#
import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple
from .dtos import AuthorDto, AuthorForCreationDto, BookDto, BookForCreationDto, BookForUpdateDto
from .errors import MappingNotFoundError
from .models import Author, Book

_CONVERTERS: Dict[Tuple[type, type], Callable] = {}


def converter(source_type: type, target_shape: type) -> Callable:
    """
    Register the decorated function as the converter from `source_type` to `target_shape`
    """

    def register(func: Callable) -> Callable:
        _CONVERTERS[(source_type, target_shape)] = func
        return func

    return register


def translate(source: Any, target_shape: type) -> Any:
    """
    :param source: object to convert
    :param target_shape: class of the result
    :return: target_shape instance
    """
    func = _CONVERTERS.get((type(source), target_shape), None)
    if func is None:
        raise MappingNotFoundError(type(source), target_shape)
    return func(source)


def translate_many(sources: Iterable[Any], target_shape: type) -> List[Any]:
    return [translate(source, target_shape) for source in sources]


def current_age(date_of_birth: datetime.date, date_of_death: Optional[datetime.date] = None, today: Optional[datetime.date] = None) -> int:
    """
    :param date_of_birth: birth date
    :param date_of_death: the age is calculated up to this date when set
    :param today: reference date, defaults to the current utc date
    :return: age in completed years
    """
    if date_of_death is not None:
        reference = date_of_death
    elif today is not None:
        reference = today
    else:
        reference = datetime.datetime.now(datetime.timezone.utc).date()
    age = reference.year - date_of_birth.year
    if (reference.month, reference.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


@converter(Author, AuthorDto)
def author_to_dto(author: Author) -> AuthorDto:
    return AuthorDto(
        id=author.id,
        name=f"{author.first_name} {author.last_name}",
        age=current_age(author.date_of_birth, author.date_of_death),
        genre=author.genre,
    )


@converter(Book, BookDto)
def book_to_dto(book: Book) -> BookDto:
    return BookDto(id=book.id, title=book.title, description=book.description, author_id=book.author_id)


@converter(Book, BookForUpdateDto)
def book_to_update_dto(book: Book) -> BookForUpdateDto:
    return BookForUpdateDto(title=book.title, description=book.description)


@converter(BookForCreationDto, Book)
def book_from_creation_dto(dto: BookForCreationDto) -> Book:
    return Book(title=dto.title, description=dto.description)


@converter(BookForUpdateDto, Book)
def book_from_update_dto(dto: BookForUpdateDto) -> Book:
    return Book(title=dto.title, description=dto.description)


@converter(AuthorForCreationDto, Author)
def author_from_creation_dto(dto: AuthorForCreationDto) -> Author:
    return Author(
        first_name=dto.first_name,
        last_name=dto.last_name,
        date_of_birth=dto.date_of_birth,
        date_of_death=dto.date_of_death,
        genre=dto.genre,
        books=translate_many(dto.books, Book),
    )


def update_from(dto: BookForUpdateDto, book: Book) -> Book:
    """
    Copy the attributes of an update dto onto an existing book
    """
    book.title = dto.title
    book.description = dto.description
    return book
