#
# The library resources: flask_restful Resource classes exposed by LibraAPI.expose_library
#
# The http methods are wrapped by http_method_decorator, which commits the session and
# converts the raised LibraErrors to json error responses.
#
# Links are only added when the client accepts the vendor media type (request.is_hateoas):
#
#   GET /api/authors                        => [ {"id": ..., "name": ..., "age": ..., "genre": ...}, ...]
#                                              X-Pagination: {"totalCount": 7, ..., "nextPageLink": ...}
#   GET /api/authors  (hypermedia)          => {"value": [ {..., "links": [...]}, ...], "links": [...]}
#
import uuid
from http import HTTPStatus
from typing import Any, Dict, List, Optional
from flask import current_app, request
from flask_restful import Resource
import libra
from .config import get_config
from .dtos import AuthorDto, AuthorForCreationDto, BookDto, BookForCreationDto, BookForUpdateDto
from .errors import ConflictError, GenericError, NotFoundError, ValidationError
from .libra_init import DB, current_libra
from .links import AUTHOR_LINKS, BOOK_LINKS, NEXT_PAGE, PREVIOUS_PAGE, LinkFactory, linked_collection, linked_resource, serialize_links
from .models import Author, Book
from .repository import LibraryRepository
from .shaping import has_properties, shape_data, shape_data_many
from .translate import translate, translate_many, update_from
from .uri_builder import FlaskUriBuilder
from .util import split_csv


def get_repository() -> LibraryRepository:
    return LibraryRepository(DB.session, current_libra().mappings)


def get_link_factory() -> LinkFactory:
    return LinkFactory(FlaskUriBuilder(current_libra().api.routes))


def make_response(data: Any, status: int = HTTPStatus.OK.value, headers: Optional[Dict[str, str]] = None):
    """
    :param data: json serializable response body
    :param status: http status code
    :param headers: additional response headers
    :return: LibraResponse
    """
    response = current_app.json.response(data)
    response.status_code = status
    if headers:
        response.headers.update(headers)
    if request.is_hateoas:
        response.use_vendor_media_type()
    return response


def no_content():
    return current_app.response_class(status=HTTPStatus.NO_CONTENT.value)


def validate_fields(shape: type, fields: Optional[str]) -> None:
    if not has_properties(shape, fields):
        raise ValidationError(f'Invalid fields "{fields}"')


def author_record(author: Author, fields: Optional[str] = None) -> Dict[str, Any]:
    """
    :return: shaped AuthorDto, with links when the client requested them
    """
    dto = translate(author, AuthorDto)
    if not request.is_hateoas:
        return shape_data(dto, fields)
    record = shape_data(dto, fields, include_identity=True)
    links = get_link_factory().for_resource(AUTHOR_LINKS, {"author_id": dto.id}, fields)
    return linked_resource(record, links)


def book_record(book: Book) -> Dict[str, Any]:
    dto = translate(book, BookDto)
    record = shape_data(dto)
    if not request.is_hateoas:
        return record
    links = get_link_factory().for_resource(BOOK_LINKS, {"author_id": dto.author_id, "book_id": dto.id})
    return linked_resource(record, links)


class RootAPI(Resource):
    def get(self):
        """
        Entry point of the api, lists the top level links
        """
        if not request.is_hateoas:
            return no_content()
        return make_response(serialize_links(get_link_factory().for_root()))


class AuthorsAPI(Resource):
    def get(self):
        """
        Paged, filtered, sorted and shaped list of authors
        """
        parameters = request.resource_parameters
        mappings = current_libra().mappings
        if not mappings.is_valid(AuthorDto, Author, parameters.order_by):
            raise ValidationError(f'Invalid orderBy "{parameters.order_by}"')
        validate_fields(AuthorDto, parameters.fields)

        authors = get_repository().get_authors(parameters)
        dtos = translate_many(authors, AuthorDto)
        link_factory = get_link_factory()
        pagination = authors.metadata()

        if request.is_hateoas:
            records = []
            for record in shape_data_many(dtos, parameters.fields, include_identity=True):
                links = link_factory.for_resource(AUTHOR_LINKS, {"author_id": record[AuthorDto._s_identity]}, parameters.fields)
                records.append(linked_resource(record, links))
            body = linked_collection(records, link_factory.for_collection("GetAuthors", parameters, authors))
        else:
            pagination["previousPageLink"] = link_factory.resource_uri("GetAuthors", parameters, PREVIOUS_PAGE) if authors.has_previous else None
            pagination["nextPageLink"] = link_factory.resource_uri("GetAuthors", parameters, NEXT_PAGE) if authors.has_next else None
            body = shape_data_many(dtos, parameters.fields)

        headers = {get_config("PAGINATION_HEADER"): current_app.json.dumps(pagination)}
        return make_response(body, headers=headers)

    def post(self):
        """
        Create an author, with its books
        """
        author_dto = AuthorForCreationDto.from_payload(request.get_payload())
        repository = get_repository()
        author = repository.add_author(translate(author_dto, Author))
        if not repository.save():
            raise GenericError("Creating an author failed on save.")

        location = get_link_factory().uri_builder.build("GetAuthor", {"author_id": author.id})
        return make_response(author_record(author), HTTPStatus.CREATED.value, {"Location": location})


class AuthorAPI(Resource):
    def get(self, author_id: uuid.UUID):
        fields = request.fields
        validate_fields(AuthorDto, fields)
        author = get_repository().get_author(author_id)
        if author is None:
            raise NotFoundError(f"Author {author_id}")
        return make_response(author_record(author, fields))

    def post(self, author_id: uuid.UUID):
        """
        Authors can't be created with a client-generated id
        """
        if get_repository().author_exists(author_id):
            raise ConflictError(f"Author {author_id} already exists")
        raise NotFoundError(f"Author {author_id}")

    def delete(self, author_id: uuid.UUID):
        repository = get_repository()
        author = repository.get_author(author_id)
        if author is None:
            raise NotFoundError(f"Author {author_id}")
        repository.delete_author(author)
        if not repository.save():
            raise GenericError(f"Deleting author {author_id} failed on save.")
        return no_content()


class AuthorCollectionsAPI(Resource):
    def post(self):
        """
        Create a list of authors in a single request
        """
        payload = request.get_payload()
        if not isinstance(payload, list):
            raise ValidationError("Invalid author collection payload: a json list is expected")
        author_dtos = [AuthorForCreationDto.from_payload(item) for item in payload]

        repository = get_repository()
        authors = [repository.add_author(translate(author_dto, Author)) for author_dto in author_dtos]
        if not repository.save():
            raise GenericError("Creating an author collection failed on save.")

        ids = ",".join(str(author.id) for author in authors)
        location = get_link_factory().uri_builder.build("GetAuthorCollection", {"ids": ids})
        body = shape_data_many(translate_many(authors, AuthorDto))
        return make_response(body, HTTPStatus.CREATED.value, {"Location": location})


class AuthorCollectionAPI(Resource):
    def get(self, ids: str):
        """
        :param ids: comma separated author ids
        """
        author_ids = parse_ids(ids)
        authors = get_repository().get_authors_by_ids(author_ids)
        if len(authors) != len(set(author_ids)):
            raise NotFoundError(f"Authors ({ids})")
        return make_response(shape_data_many(translate_many(authors, AuthorDto)))


def parse_ids(ids: str) -> List[uuid.UUID]:
    """
    :param ids: comma separated uuids
    :return: list of uuids
    """
    tokens = split_csv(ids)
    if not tokens:
        raise ValidationError("No author ids")
    try:
        return [uuid.UUID(token) for token in tokens]
    except ValueError:
        raise ValidationError(f'Invalid author ids "{ids}"')


class BooksAPI(Resource):
    def get(self, author_id: uuid.UUID):
        repository = get_repository()
        if not repository.author_exists(author_id):
            raise NotFoundError(f"Author {author_id}")

        records = [book_record(book) for book in repository.get_books_for_author(author_id)]
        if not request.is_hateoas:
            return make_response(records)
        link_factory = get_link_factory()
        return make_response(linked_collection(records, link_factory.for_list("GetBooksForAuthor", {"author_id": author_id})))

    def post(self, author_id: uuid.UUID):
        book_dto = BookForCreationDto.from_payload(request.get_payload()).validate()
        repository = get_repository()
        if not repository.author_exists(author_id):
            raise NotFoundError(f"Author {author_id}")

        book = repository.add_book_for_author(author_id, translate(book_dto, Book))
        if not repository.save():
            raise GenericError(f"Creating a book for author {author_id} failed on save.")

        location = get_link_factory().uri_builder.build("GetBookForAuthor", {"author_id": author_id, "book_id": book.id})
        return make_response(book_record(book), HTTPStatus.CREATED.value, {"Location": location})


class BookAPI(Resource):
    def get(self, author_id: uuid.UUID, book_id: uuid.UUID):
        return make_response(book_record(self._get_book(author_id, book_id)))

    def delete(self, author_id: uuid.UUID, book_id: uuid.UUID):
        repository = get_repository()
        book = self._get_book(author_id, book_id)
        repository.delete_book(book)
        if not repository.save():
            raise GenericError(f"Deleting book {book_id} for author {author_id} failed on save.")
        return no_content()

    def put(self, author_id: uuid.UUID, book_id: uuid.UUID):
        """
        Full update, the book is created with the requested id when it doesn't exist yet
        """
        book_dto = BookForUpdateDto.from_payload(request.get_payload()).validate()
        repository = get_repository()
        if not repository.author_exists(author_id):
            raise NotFoundError(f"Author {author_id}")

        book = repository.get_book_for_author(author_id, book_id)
        if book is None:
            return self._upsert(repository, author_id, book_id, book_dto)

        repository.update_book(update_from(book_dto, book))
        if not repository.save():
            raise GenericError(f"Updating book {book_id} for author {author_id} failed on save.")
        return no_content()

    def patch(self, author_id: uuid.UUID, book_id: uuid.UUID):
        """
        Partial update with a json patch document, e.g.
            [{"op": "replace", "path": "/description", "value": "new description"}]
        the book is created with the requested id when it doesn't exist yet
        """
        payload = request.get_payload()
        repository = get_repository()
        if not repository.author_exists(author_id):
            raise NotFoundError(f"Author {author_id}")

        book = repository.get_book_for_author(author_id, book_id)
        if book is None:
            book_dto = BookForUpdateDto.blank().apply_patch(payload).validate()
            return self._upsert(repository, author_id, book_id, book_dto)

        book_dto = translate(book, BookForUpdateDto).apply_patch(payload).validate()
        repository.update_book(update_from(book_dto, book))
        if not repository.save():
            raise GenericError(f"Patching book {book_id} for author {author_id} failed on save.")
        return no_content()

    @staticmethod
    def _get_book(author_id: uuid.UUID, book_id: uuid.UUID) -> Book:
        repository = get_repository()
        if not repository.author_exists(author_id):
            raise NotFoundError(f"Author {author_id}")
        book = repository.get_book_for_author(author_id, book_id)
        if book is None:
            raise NotFoundError(f"Book {book_id} for author {author_id}")
        return book

    @staticmethod
    def _upsert(repository: LibraryRepository, author_id: uuid.UUID, book_id: uuid.UUID, book_dto: BookForUpdateDto):
        if repository.book_exists(book_id):
            raise ConflictError(f"Book {book_id} belongs to another author")

        book = translate(book_dto, Book)
        book.id = book_id
        repository.add_book_for_author(author_id, book)
        if not repository.save():
            raise GenericError(f"Upserting book {book_id} for author {author_id} failed on save.")
        libra.log.info(f"Upserted book {book_id} for author {author_id}")

        location = get_link_factory().uri_builder.build("GetBookForAuthor", {"author_id": author_id, "book_id": book_id})
        return make_response(book_record(book), HTTPStatus.CREATED.value, {"Location": location})
