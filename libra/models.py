#
# Library database objects
#
import uuid
import sqlalchemy
from .libra_init import DB as db


class Author(db.Model):
    """
    description: Author of zero or more books
    """

    __tablename__ = "Authors"
    id = db.Column(sqlalchemy.Uuid, primary_key=True, default=uuid.uuid4)
    first_name = db.Column(db.String(50), nullable=False)
    last_name = db.Column(db.String(50), nullable=False)
    date_of_birth = db.Column(db.Date, nullable=False)
    date_of_death = db.Column(db.Date, nullable=True)
    genre = db.Column(db.String(50), nullable=False)
    books = db.relationship("Book", back_populates="author", cascade="all, delete-orphan", order_by="Book.title")

    def __repr__(self):
        return f"<Author {self.id} {self.first_name} {self.last_name}>"


class Book(db.Model):
    """
    description: Book written by an author
    """

    __tablename__ = "Books"
    id = db.Column(sqlalchemy.Uuid, primary_key=True, default=uuid.uuid4)
    title = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(500), nullable=True)
    author_id = db.Column(sqlalchemy.Uuid, db.ForeignKey("Authors.id"), nullable=False)
    author = db.relationship("Author", back_populates="books")

    def __repr__(self):
        return f"<Book {self.id} {self.title}>"
