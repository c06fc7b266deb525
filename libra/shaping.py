#
# Field selection and data shaping
#
# The `fields` query argument lets clients pick the fields they want to receive:
#   GET /api/authors?fields=id,name
# `has_properties` validates the argument against a shape before anything is queried,
# `shape_data` then projects the DTOs to the requested fields.
#
from typing import Iterable, List, Optional, Type
from .errors import UnknownFieldError
from .shapes import Shape
from .util import is_blank, split_csv


class ShapedRecord(dict):
    """
    Ordered field name => value mapping built from a single shape instance
    """


def has_properties(shape: Type[Shape], fields: Optional[str]) -> bool:
    """
    :param shape: Shape subclass
    :param fields: csv of client field names ("id, name"), case-insensitive
    :return: True for blank `fields` or when every field is declared by the shape,
        empty tokens ("id,,name") are invalid
    """
    if is_blank(fields):
        return True

    for field_name in split_csv(fields):
        if not field_name or shape.get_field(field_name) is None:
            return False
    return True


def shape_data(instance: Shape, fields: Optional[str] = None, include_identity: bool = False) -> ShapedRecord:
    """
    Project a shape instance on a subset of its fields
    :param instance: Shape instance (dataclass)
    :param fields: csv of client field names, blank: all fields in declaration order
    :param include_identity: append the identity field if it wasn't requested (links need it)
    :return: ShapedRecord, keys are the declared field names in the requested order
    """
    shape = type(instance)
    record = ShapedRecord()

    if is_blank(fields):
        selected = list(shape._s_fields.values())
    else:
        selected = []
        for field_name in split_csv(fields):
            shape_field = shape.get_field(field_name)
            if shape_field is None:
                raise UnknownFieldError(shape, field_name)
            selected.append(shape_field)

    for shape_field in selected:
        if shape_field.name in record:
            # listed twice, keep the first position
            continue
        record[shape_field.name] = getattr(instance, shape_field.attr)

    if include_identity:
        identity = shape._s_identity_field
        if identity is not None and identity.name not in record:
            record[identity.name] = getattr(instance, identity.attr)

    return record


def shape_data_many(instances: Iterable[Shape], fields: Optional[str] = None, include_identity: bool = False) -> List[ShapedRecord]:
    """
    :return: one ShapedRecord per instance, in input order
    """
    return [shape_data(instance, fields, include_identity) for instance in instances]
