#
# Hypermedia links
#
# Links are only added to the responses when the client negotiated the vendor media type
# (request.is_hateoas). The LinkFactory is pure: it renders links from the request
# parameters and the resource identity with an injected ResourceUriBuilder.
#
# Example collection envelope:
# {
#   "value": [ {"id": "...", "name": "...", "links": [...]}, ...],
#   "links": [
#       {"href": "http://localhost/api/authors?orderBy=Name&pageNumber=1&pageSize=10", "rel": "self", "method": "GET"},
#       {"href": "http://localhost/api/authors?orderBy=Name&pageNumber=2&pageSize=10", "rel": "nextPage", "method": "GET"}
#   ]
# }
#
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple
from .errors import SystemValidationError
from .pagination import PagedList
from .uri_builder import ResourceUriBuilder

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")

SELF = "self"
NEXT_PAGE = "nextPage"
PREVIOUS_PAGE = "previousPage"
CURRENT_PAGE = "current"


@dataclass(frozen=True)
class Link:
    href: str
    rel: str
    method: str

    def __post_init__(self) -> None:
        if self.method not in HTTP_METHODS:
            raise SystemValidationError(f'Invalid link method "{self.method}"')

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class ResourceLinkSpec:
    """
    The links of a single resource
    :param self_route: route name of the resource itself
    :param follow_ups: (route name, rel, method) of the operations available on the resource
    """

    self_route: str
    follow_ups: Tuple[Tuple[str, str, str], ...] = ()


AUTHOR_LINKS = ResourceLinkSpec(
    "GetAuthor",
    (
        ("DeleteAuthor", "delete_author", "DELETE"),
        ("CreateBookForAuthor", "create_book_for_author", "POST"),
        ("GetBooksForAuthor", "books", "GET"),
    ),
)

BOOK_LINKS = ResourceLinkSpec(
    "GetBookForAuthor",
    (
        ("DeleteBookForAuthor", "delete_book", "DELETE"),
        ("UpdateBookForAuthor", "update_book", "PUT"),
        ("PartiallyUpdateBookForAuthor", "partially_update_book", "PATCH"),
    ),
)


class LinkFactory:
    def __init__(self, uri_builder: ResourceUriBuilder) -> None:
        self.uri_builder = uri_builder

    def resource_uri(self, route_name: str, parameters, kind: str = CURRENT_PAGE) -> str:
        """
        :param route_name: collection route name
        :param parameters: ResourceParameters of the request
        :param kind: CURRENT_PAGE, NEXT_PAGE or PREVIOUS_PAGE
        :return: uri of the requested page of the collection
        """
        page_number = parameters.page_number
        if kind == NEXT_PAGE:
            page_number += 1
        elif kind == PREVIOUS_PAGE:
            page_number -= 1
        elif kind != CURRENT_PAGE:
            raise SystemValidationError(f'Invalid page uri kind "{kind}"')
        return self.uri_builder.build(route_name, parameters.to_route_values(page_number))

    def for_collection(self, route_name: str, parameters, paged_list: PagedList) -> List[Link]:
        """
        :return: self link, plus the nextPage and previousPage links when those pages exist
        """
        links = [Link(self.resource_uri(route_name, parameters, CURRENT_PAGE), SELF, "GET")]
        if paged_list.has_next:
            links.append(Link(self.resource_uri(route_name, parameters, NEXT_PAGE), NEXT_PAGE, "GET"))
        if paged_list.has_previous:
            links.append(Link(self.resource_uri(route_name, parameters, PREVIOUS_PAGE), PREVIOUS_PAGE, "GET"))
        return links

    def for_resource(self, link_spec: ResourceLinkSpec, route_values: Mapping[str, Any], fields: Optional[str] = None) -> List[Link]:
        """
        :param link_spec: ResourceLinkSpec of the resource type
        :param route_values: the url parameters identifying the resource, e.g. {"author_id": ...}
        :param fields: requested fields, kept in the self link
        :return: list of links
        """
        self_values = dict(route_values)
        self_values["fields"] = fields
        links = [Link(self.uri_builder.build(link_spec.self_route, self_values), SELF, "GET")]
        for route_name, rel, method in link_spec.follow_ups:
            links.append(Link(self.uri_builder.build(route_name, route_values), rel, method))
        return links

    def for_list(self, route_name: str, route_values: Mapping[str, Any]) -> List[Link]:
        """
        :return: self link of an unpaged child collection, e.g. the books of an author
        """
        return [Link(self.uri_builder.build(route_name, route_values), SELF, "GET")]

    def for_root(self) -> List[Link]:
        return [
            Link(self.uri_builder.build("GetRoot", {}), SELF, "GET"),
            Link(self.uri_builder.build("GetAuthors", {}), "authors", "GET"),
            Link(self.uri_builder.build("CreateAuthor", {}), "create_author", "POST"),
        ]


def serialize_links(links: Sequence[Link]) -> List[Dict[str, str]]:
    return [link.to_dict() for link in links]


def linked_resource(record: Mapping[str, Any], links: Sequence[Link]) -> Dict[str, Any]:
    """
    :return: copy of the shaped record with an added "links" field
    """
    result = dict(record)
    result["links"] = serialize_links(links)
    return result


def linked_collection(records: Sequence[Mapping[str, Any]], links: Sequence[Link]) -> Dict[str, Any]:
    return {"value": list(records), "links": serialize_links(links)}
