#
# PagedList: one page of a query result with its metadata
#
import math
from typing import Any, Dict, List, Sequence
import libra


class PagedList(list):
    """
    A page of items, `total_count` is the size of the unpaged result.

    Page numbers outside [1, total_pages] are accepted, the page is empty then.
    """

    def __init__(self, items: Sequence[Any], total_count: int, page_number: int, page_size: int) -> None:
        """
        :param items: the items of the current page
        :param total_count: number of items in the unpaged result
        :param page_number: 1-based page number
        :param page_size: maximum number of items per page
        """
        if page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {page_size}")
        if len(items) > page_size:
            raise ValueError(f"Page holds {len(items)} items, more than the page size {page_size}")
        super().__init__(items)
        self.total_count = total_count
        self.current_page = page_number
        self.page_size = page_size

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def metadata(self) -> Dict[str, int]:
        """
        :return: the page counts, as sent in the pagination header
        """
        return {
            "totalCount": self.total_count,
            "pageSize": self.page_size,
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
        }

    @classmethod
    def create(cls, query, page_number: int, page_size: int) -> "PagedList":
        """
        Count the (filtered, ordered) query once and fetch the requested window
        :param query: sqla query object
        :param page_number: 1-based page number
        :param page_size: number of items per page
        :return: PagedList
        """
        total_count = query.count()
        offset = max(0, (page_number - 1) * page_size)
        items: List[Any] = query.offset(offset).limit(page_size).all()
        libra.log.debug(f"Page {page_number} (size {page_size}): {len(items)} of {total_count} items")
        return cls(items, total_count, page_number, page_size)
