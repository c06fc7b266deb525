#
# Demo data, loaded at startup when LIBRA_SEED is set and the database is empty
#
import datetime
import libra
from .models import Author, Book

SEED_AUTHORS = [
    ("Stephen", "King", datetime.date(1947, 9, 21), None, "Horror", [
        ("The Shining", "The Shining is a horror novel by American author Stephen King."),
        ("Misery", "Misery is a 1987 psychological horror thriller novel by Stephen King."),
        ("It", "It is a 1986 horror novel by American author Stephen King."),
    ]),
    ("George", "RR Martin", datetime.date(1948, 9, 20), None, "Fantasy", [
        ("A Game of Thrones", "A Game of Thrones is the first novel in A Song of Ice and Fire."),
        ("A Dance with Dragons", "A Dance with Dragons is the fifth of seven planned novels."),
    ]),
    ("Douglas", "Adams", datetime.date(1952, 3, 11), datetime.date(2001, 5, 11), "Science fiction", [
        ("The Hitchhiker's Guide to the Galaxy", "A comedy science fiction series created by Douglas Adams."),
    ]),
    ("Neil", "Gaiman", datetime.date(1960, 11, 10), None, "Fantasy", [
        ("American Gods", "American Gods is a Hugo and Nebula Award-winning novel by Neil Gaiman."),
    ]),
    ("Tom", "Lanoye", datetime.date(1958, 8, 27), None, "Various", [
        ("Speechless", "Good-natured and often humorous, Speechless is at times a 'song of curses'."),
    ]),
    ("Hugh", "Howey", datetime.date(1975, 4, 15), None, "Science fiction", [
        ("Wool", "Wool is the first part of Howey's Silo series."),
    ]),
    ("Jens", "Lapidus", datetime.date(1974, 5, 24), None, "Thriller", [
        ("Easy Money", "Easy Money or Snabba Cash is a novel from 2006 by Jens Lapidus."),
    ]),
]


def seed_library(session) -> int:
    """
    :param session: sqla session
    :return: number of authors added
    """
    if session.query(Author.id).first() is not None:
        libra.log.debug("Database already holds authors, skipping seed")
        return 0

    for first_name, last_name, date_of_birth, date_of_death, genre, books in SEED_AUTHORS:
        author = Author(
            first_name=first_name,
            last_name=last_name,
            date_of_birth=date_of_birth,
            date_of_death=date_of_death,
            genre=genre,
            books=[Book(title=title, description=description) for title, description in books],
        )
        session.add(author)
    session.commit()
    libra.log.info(f"Seeded {len(SEED_AUTHORS)} authors")
    return len(SEED_AUTHORS)
