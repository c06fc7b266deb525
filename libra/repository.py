#
# LibraryRepository: database access for the authors and books
#
from typing import List, Optional, Sequence
from uuid import UUID
from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
import libra
from .dtos import AuthorDto
from .models import Author, Book
from .pagination import PagedList
from .parameters import ResourceParameters
from .property_mapping import PropertyMappingRegistry, apply_ordering, resolve_ordering


class LibraryRepository:
    """
    :param session: sqla session
    :param mappings: frozen PropertyMappingRegistry, used to order the author collection
    """

    def __init__(self, session, mappings: PropertyMappingRegistry) -> None:
        self.session = session
        self.mappings = mappings

    #
    # Authors
    #
    def get_authors(self, parameters: ResourceParameters) -> PagedList:
        """
        :param parameters: validated ResourceParameters
        :return: PagedList of Author instances
        """
        query = self.session.query(Author)

        if parameters.genre:
            genre = parameters.genre.strip().lower()
            query = query.filter(func.lower(Author.genre) == genre)

        if parameters.search_query:
            search_query = parameters.search_query.strip().lower()
            query = query.filter(
                or_(
                    func.lower(Author.genre).contains(search_query, autoescape=True),
                    func.lower(Author.first_name).contains(search_query, autoescape=True),
                    func.lower(Author.last_name).contains(search_query, autoescape=True),
                )
            )

        table = self.mappings.resolve(AuthorDto, Author)
        steps = resolve_ordering(table, parameters.order_by)
        # the id breaks ties so the pages don't overlap
        steps.append(("id", False))
        query = apply_ordering(query, Author, steps)
        return PagedList.create(query, parameters.page_number, parameters.page_size)

    def get_author(self, author_id: UUID) -> Optional[Author]:
        return self.session.get(Author, author_id)

    def get_authors_by_ids(self, author_ids: Sequence[UUID]) -> List[Author]:
        """
        :return: the existing authors, ordered by first and last name
        """
        if not author_ids:
            return []
        query = self.session.query(Author).filter(Author.id.in_(list(author_ids)))
        return query.order_by(Author.first_name, Author.last_name).all()

    def author_exists(self, author_id: UUID) -> bool:
        return self.session.query(Author.id).filter(Author.id == author_id).first() is not None

    def add_author(self, author: Author) -> Author:
        """
        Add an author and its books, new ids are generated
        """
        self.session.add(author)
        self.session.flush()
        libra.log.info(f"Added author {author.id}")
        return author

    def delete_author(self, author: Author) -> None:
        self.session.delete(author)
        libra.log.info(f"Deleted author {author.id}")

    #
    # Books
    #
    def get_books_for_author(self, author_id: UUID) -> List[Book]:
        return self.session.query(Book).filter(Book.author_id == author_id).order_by(Book.title).all()

    def get_book_for_author(self, author_id: UUID, book_id: UUID) -> Optional[Book]:
        return self.session.query(Book).filter(Book.author_id == author_id, Book.id == book_id).first()

    def book_exists(self, book_id: UUID) -> bool:
        return self.session.query(Book.id).filter(Book.id == book_id).first() is not None

    def add_book_for_author(self, author_id: UUID, book: Book) -> Book:
        """
        :param author_id: id of an existing author
        :param book: new Book, its id is generated when not set (upserts keep the requested id)
        """
        book.author_id = author_id
        self.session.add(book)
        self.session.flush()
        libra.log.info(f"Added book {book.id} for author {author_id}")
        return book

    def update_book(self, book: Book) -> Book:
        # the instance is attached to the session, the changes are flushed on save
        libra.log.info(f"Updated book {book.id}")
        return book

    def delete_book(self, book: Book) -> None:
        self.session.delete(book)
        libra.log.info(f"Deleted book {book.id} for author {book.author_id}")

    def save(self) -> bool:
        """
        Commit the pending changes
        :return: False when the commit failed, the session has been rolled back then
        """
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            libra.log.exception(exc)
            self.session.rollback()
            return False
        return True
