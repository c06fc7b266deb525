import pytest
from werkzeug.datastructures import MultiDict

from libra.errors import ValidationError
from libra.parameters import ResourceParameters


def test_defaults() -> None:
    parameters = ResourceParameters.from_args(MultiDict())
    assert parameters == ResourceParameters(page_number=1, page_size=10, order_by="Name")


def test_query_arguments() -> None:
    args = MultiDict(
        [
            ("pageNumber", "2"),
            ("pageSize", "5"),
            ("searchQuery", " king "),
            ("genre", "Horror"),
            ("orderBy", "age desc"),
            ("fields", "id,name"),
        ]
    )
    parameters = ResourceParameters.from_args(args)
    assert parameters.page_number == 2
    assert parameters.page_size == 5
    assert parameters.search_query == "king"
    assert parameters.genre == "Horror"
    assert parameters.order_by == "age desc"
    assert parameters.fields == "id,name"


def test_argument_names_are_case_insensitive() -> None:
    parameters = ResourceParameters.from_args({"PAGESIZE": "3", "orderby": "genre", "Fields": "name"})
    assert parameters.page_size == 3
    assert parameters.order_by == "genre"
    assert parameters.fields == "name"


@pytest.mark.parametrize("page_size, expected", [("50", 20), ("20", 20), ("0", 1), ("-4", 1), ("7", 7)])
def test_page_size_is_clamped(page_size: str, expected: int) -> None:
    assert ResourceParameters.from_args({"pageSize": page_size}).page_size == expected


def test_page_number_is_at_least_one() -> None:
    assert ResourceParameters.from_args({"pageNumber": "-3"}).page_number == 1


def test_invalid_integer() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ResourceParameters.from_args({"pageSize": "ten"})
    assert exc_info.value.status_code == 400


def test_route_values() -> None:
    parameters = ResourceParameters(page_number=2, page_size=5, genre="Fantasy", order_by="Name")
    values = parameters.to_route_values()
    assert list(values) == ["searchQuery", "genre", "orderBy", "fields", "pageNumber", "pageSize"]
    assert values["pageNumber"] == 2
    assert parameters.to_route_values(3)["pageNumber"] == 3
    assert values["searchQuery"] is None
