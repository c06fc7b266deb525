import pytest

from libra.pagination import PagedList


class _FakeQuery:
    def __init__(self, items: list) -> None:
        self.items = items
        self.count_calls = 0
        self.window = None

    def count(self) -> int:
        self.count_calls += 1
        return len(self.items)

    def offset(self, offset: int) -> "_FakeQuery":
        self._offset = offset
        return self

    def limit(self, limit: int) -> "_FakeQuery":
        self.window = (self._offset, limit)
        return self

    def all(self) -> list:
        offset, limit = self.window
        return self.items[offset : offset + limit]


def test_first_page_metadata() -> None:
    paged = PagedList(list(range(10)), 25, 1, 10)
    assert paged.total_pages == 3
    assert not paged.has_previous
    assert paged.has_next
    assert paged.metadata() == {"totalCount": 25, "pageSize": 10, "currentPage": 1, "totalPages": 3}


def test_last_page() -> None:
    paged = PagedList(list(range(5)), 25, 3, 10)
    assert paged.has_previous
    assert not paged.has_next
    assert list(paged) == [0, 1, 2, 3, 4]


def test_exact_multiple() -> None:
    assert PagedList([], 20, 1, 10).total_pages == 2


def test_empty_result() -> None:
    paged = PagedList([], 0, 1, 10)
    assert paged.total_pages == 0
    assert not paged.has_next
    assert not paged.has_previous


def test_page_beyond_the_last_one() -> None:
    paged = PagedList([], 5, 4, 10)
    assert paged.current_page == 4
    assert paged.has_previous
    assert not paged.has_next


def test_invalid_pages() -> None:
    with pytest.raises(ValueError):
        PagedList([1, 2, 3], 3, 1, 2)
    with pytest.raises(ValueError):
        PagedList([], 0, 1, 0)


def test_create_fetches_the_requested_window() -> None:
    query = _FakeQuery(list(range(23)))
    paged = PagedList.create(query, 3, 10)
    assert query.count_calls == 1
    assert query.window == (20, 10)
    assert list(paged) == [20, 21, 22]
    assert paged.total_count == 23
    assert paged.total_pages == 3


def test_create_never_uses_a_negative_offset() -> None:
    query = _FakeQuery(list(range(3)))
    PagedList.create(query, 0, 10)
    assert query.window == (0, 10)
