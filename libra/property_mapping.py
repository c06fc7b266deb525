# property_mapping.py: client-facing sort keys => entity attributes
#
# A PropertyMappingRegistry holds one PropertyMappingTable per (source shape, target shape) pair,
# e.g. (AuthorDto, Author). The tables are built when the app is created, then the registry is
# frozen and only read from request handlers.
#
# Sorting follows the "orderBy" query argument:
#   ?orderBy=genre,age desc
# every clause is "<key>[ <direction>]", the key is looked up case-insensitively and expanded
# to the mapped entity attributes. Mappings with revert=True invert the direction, for example
# "age" maps to "date_of_birth" and sorting by age ascending means sorting by date of birth descending.
#
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, List, Mapping, Sequence, Tuple
from collections.abc import Mapping as MappingABC
import libra
from .errors import MappingConflictError, MappingNotFoundError
from .util import is_blank, split_csv, first_word

ASCENDING = "asc"
DESCENDING = "desc"

# (entity attribute name, descending)
OrderingStep = Tuple[str, bool]


@dataclass(frozen=True)
class MappingEntry:
    """
    The entity attribute(s) a client-facing key maps to
    :param target_fields: ordered, non-empty list of entity attribute names
    :param revert: whether the natural order of the target is the inverse of the key's order
    """

    target_fields: Tuple[str, ...]
    revert: bool = False

    def __init__(self, target_fields: Sequence[str], revert: bool = False) -> None:
        if isinstance(target_fields, str):
            target_fields = (target_fields,)
        target_fields = tuple(target_fields)
        if not target_fields:
            raise MappingConflictError("A mapping entry needs at least one target field")
        object.__setattr__(self, "target_fields", target_fields)
        object.__setattr__(self, "revert", bool(revert))


class PropertyMappingTable(MappingABC):
    """
    Read-only, case-insensitive key => MappingEntry dictionary.
    Keys are normalized (lower-cased) when the table is built and when they're looked up.
    """

    def __init__(self, entries: Mapping[str, MappingEntry]) -> None:
        normalized = {}
        names = {}
        for key, entry in entries.items():
            norm_key = key.strip().lower()
            if norm_key in normalized:
                raise MappingConflictError(f'Duplicate mapping key "{key}" (keys are case-insensitive)')
            if not isinstance(entry, MappingEntry):
                entry = MappingEntry(entry)
            normalized[norm_key] = entry
            names[norm_key] = key.strip()
        self._entries = MappingProxyType(normalized)
        self._names = MappingProxyType(names)

    def __getitem__(self, key: str) -> MappingEntry:
        return self._entries[key.strip().lower()]

    def __contains__(self, key: Any) -> bool:
        return isinstance(key, str) and key.strip().lower() in self._entries

    def __iter__(self) -> Iterator[str]:
        # iterate over the keys as they were declared
        return iter(self._names.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"<PropertyMappingTable {list(self)}>"


class PropertyMappingRegistry:
    """
    Process-wide registry of the property mapping tables.
    It is created and populated at startup, then frozen (uninitialized => built):
    after `freeze()` no more tables can be registered and the registry is only read,
    so no locking is needed when requests are served concurrently.
    """

    def __init__(self) -> None:
        self._tables = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, source_shape: type, target_shape: type, table: Mapping[str, Any]) -> PropertyMappingTable:
        """
        :param source_shape: client-facing shape, e.g. AuthorDto
        :param target_shape: underlying shape, e.g. the Author entity
        :param table: key => MappingEntry (or a list of target fields)
        :return: the registered table
        """
        if self._frozen:
            raise MappingConflictError(f"Registry is frozen, can't register <{source_shape.__name__},{target_shape.__name__}>")
        key = (source_shape, target_shape)
        if key in self._tables:
            raise MappingConflictError(f"Mapping <{source_shape.__name__},{target_shape.__name__}> already registered")
        if not isinstance(table, PropertyMappingTable):
            table = PropertyMappingTable(table)
        self._tables[key] = table
        libra.log.debug(f"Registered property mapping <{source_shape.__name__},{target_shape.__name__}>: {list(table)}")
        return table

    def freeze(self) -> "PropertyMappingRegistry":
        """
        One-time transition to the read-only state
        """
        self._frozen = True
        return self

    def resolve(self, source_shape: type, target_shape: type) -> PropertyMappingTable:
        """
        :return: the table registered for the shape pair
        A missing table is a programming error, MappingNotFoundError is raised
        """
        try:
            return self._tables[(source_shape, target_shape)]
        except KeyError:
            raise MappingNotFoundError(source_shape, target_shape)

    def is_valid(self, source_shape: type, target_shape: type, fields: str) -> bool:
        """
        Check that every key in a csv string (an "orderBy" value) is mapped
        :param fields: csv string, everything after the first space of a clause is ignored ("name desc")
        :return: True for a blank string or when all keys exist in the table
        """
        if is_blank(fields):
            return True

        table = self.resolve(source_shape, target_shape)
        for clause in split_csv(fields):
            if first_word(clause) not in table:
                return False
        return True


def resolve_ordering(table: PropertyMappingTable, order_by: str) -> List[OrderingStep]:
    """
    Expand a validated orderBy string into ordering steps
    :param table: PropertyMappingTable of the shape pair
    :param order_by: csv of "<key>[ asc|desc]" clauses, in priority order
    :return: list of (entity attribute, descending) tuples
    """
    steps = []
    for clause in split_csv(order_by):
        if not clause:
            continue
        words = clause.split()
        entry = table[words[0]]
        # the direction is the last word, "name foo desc" sorts descending
        descending = len(words) > 1 and words[-1].lower() == DESCENDING
        if entry.revert:
            descending = not descending
        for target_field in entry.target_fields:
            steps.append((target_field, descending))
    return steps


def apply_ordering(query, entity: type, steps: Sequence[OrderingStep]):
    """
    :param query: sqla query object
    :param entity: mapped class owning the attributes
    :param steps: output of `resolve_ordering`
    :return: ordered sqla query object
    """
    clauses = []
    for attr_name, descending in steps:
        attr = getattr(entity, attr_name, None)
        if attr is None:
            raise MappingConflictError(f"{entity.__name__} has no attribute {attr_name}")
        clauses.append(attr.desc() if descending else attr.asc())
    if clauses:
        query = query.order_by(*clauses)
    return query
