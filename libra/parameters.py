#
# ResourceParameters: the query string arguments of a collection request
#
#   GET /api/authors?genre=Fantasy&searchQuery=king&orderBy=age desc&fields=id,name&pageNumber=2&pageSize=5
#
# The argument names are matched case-insensitively.
#
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from .config import get_config
from .errors import ValidationError
from .util import is_blank, lower_keys


def _get_int(args: Mapping[str, str], name: str, default: int) -> int:
    value = args.get(name.lower(), None)
    if is_blank(value):
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f'Invalid {name} "{value}", an integer is expected')


def _get_str(args: Mapping[str, str], name: str, default: Optional[str] = None) -> Optional[str]:
    value = args.get(name.lower(), None)
    if is_blank(value):
        return default
    return value.strip()


@dataclass
class ResourceParameters:
    page_number: int = 1
    page_size: int = 10
    search_query: Optional[str] = None
    genre: Optional[str] = None
    order_by: str = "Name"
    fields: Optional[str] = None

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "ResourceParameters":
        """
        :param args: request.args
        :return: ResourceParameters, page size clamped to [1, MAX_PAGE_SIZE] and page number at least 1
        """
        args = lower_keys(args.items())
        max_page_size = get_config("MAX_PAGE_SIZE")
        page_size = _get_int(args, "pageSize", get_config("DEFAULT_PAGE_SIZE"))
        page_size = max(1, min(page_size, max_page_size))
        page_number = max(1, _get_int(args, "pageNumber", get_config("DEFAULT_PAGE_NUMBER")))

        return cls(
            page_number=page_number,
            page_size=page_size,
            search_query=_get_str(args, "searchQuery"),
            genre=_get_str(args, "genre"),
            order_by=_get_str(args, "orderBy", get_config("DEFAULT_ORDER_BY")),
            fields=_get_str(args, "fields"),
        )

    def to_route_values(self, page_number: Optional[int] = None) -> Dict[str, Any]:
        """
        :param page_number: page number to render instead of the current one
        :return: query string values of a collection link, in a fixed order
        """
        return {
            "searchQuery": self.search_query,
            "genre": self.genre,
            "orderBy": self.order_by,
            "fields": self.fields,
            "pageNumber": self.page_number if page_number is None else page_number,
            "pageSize": self.page_size,
        }
