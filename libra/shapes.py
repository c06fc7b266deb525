#
# Shape: base class of the data transfer objects
#
# A shape declares its client-facing fields statically, as dataclass fields.
# The client name of a field defaults to the attribute name and can be overridden with
# `shape_field(name="authorId")`. The field descriptor table is built once per class on
# first use and cached on the class.
#
import dataclasses
from typing import Any, Dict, NamedTuple, Optional
from .util import classproperty

FIELD_NAME_KEY = "libra_name"


class ShapeField(NamedTuple):
    """
    :param name: the field name used by clients (in `fields` and in the json output)
    :param attr: the python attribute holding the value
    """

    name: str
    attr: str


def shape_field(name: Optional[str] = None, **kwargs) -> Any:
    """
    dataclasses.field wrapper that stores the client-facing name of the field
    :param name: client-facing name
    :param kwargs: dataclasses.field arguments
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    if name is not None:
        metadata[FIELD_NAME_KEY] = name
    return dataclasses.field(metadata=metadata, **kwargs)


class Shape:
    """
    Mixin for dataclass DTOs
    """

    # client name of the field identifying an instance, always emitted when links are embedded
    _s_identity = "id"

    @classproperty
    def _s_fields(cls) -> Dict[str, ShapeField]:
        """
        :return: lower-cased client name => ShapeField, in declaration order
        """
        # look in cls.__dict__ so a subclass doesn't pick up the cache of its parent
        cached = cls.__dict__.get("_cached_shape_fields", None)
        if cached is not None:
            return cached

        result = {}
        for field in dataclasses.fields(cls):
            name = field.metadata.get(FIELD_NAME_KEY, field.name)
            result[name.lower()] = ShapeField(name, field.name)
        cls._cached_shape_fields = result
        return result

    @classmethod
    def get_field(cls, name: str) -> Optional[ShapeField]:
        """
        :param name: client field name, case-insensitive
        :return: ShapeField or None
        """
        return cls._s_fields.get(name.strip().lower())

    @classproperty
    def _s_identity_field(cls) -> ShapeField:
        return cls.get_field(cls._s_identity)
