#
from functools import _lru_cache_wrapper
from typing import Callable, Iterable, List, Optional, Union


class ClassPropertyDescriptor:
    """
    ClassPropertyDescriptor
    """

    def __init__(self, fget: classmethod, fset: None = None) -> None:
        self.fget = fget
        self.fset = fset

    def __get__(self, obj, klass=None):
        """
        __get__
        """
        if klass is None:
            klass = type(obj)
        return self.fget.__get__(obj, klass)()

    def __set__(self, obj, value):
        """
        __set__
        """
        if not self.fset:
            raise AttributeError("can't set attribute")
        type_ = type(obj)
        return self.fset.__get__(obj, type_)(value)


def classproperty(func: Union[Callable, _lru_cache_wrapper]) -> ClassPropertyDescriptor:
    """
    classproperty
    """
    if not isinstance(func, (classmethod, staticmethod)):
        func = classmethod(func)

    return ClassPropertyDescriptor(func)


def is_blank(value: Optional[str]) -> bool:
    """
    :return: True for None and whitespace-only strings
    """
    return value is None or not str(value).strip()


def split_csv(value: Optional[str]) -> List[str]:
    """
    Split a comma separated query string value and trim the tokens.
    Empty tokens are kept (so callers can reject "name,,genre")
    :param value: csv string, e.g. "id, name"
    :return: list of trimmed tokens, [] for a blank value
    """
    if is_blank(value):
        return []
    return [token.strip() for token in value.split(",")]


def first_word(token: str) -> str:
    """
    :return: the token up to the first space, e.g. "name desc" => "name"
    """
    return token.split(" ", 1)[0]


def lower_keys(items: Iterable) -> dict:
    """
    :param items: (key, value) pairs
    :return: dict with lower-cased keys, the first occurrence of a key wins
    """
    result = {}
    for key, value in items:
        result.setdefault(key.lower(), value)
    return result
