# flake8: noqa: F401
from .libra_init import DB, log, LIBRA, current_libra
from .errors import (
    LibraError,
    ValidationError,
    UnprocessableEntityError,
    NotFoundError,
    ConflictError,
    GenericError,
    SystemValidationError,
    UnknownFieldError,
    MappingNotFoundError,
    MappingConflictError,
)
from .request import LibraRequest
from .json_encoder import LibraJSONProvider
from .property_mapping import MappingEntry, PropertyMappingTable, PropertyMappingRegistry, resolve_ordering, apply_ordering
from .shapes import Shape, ShapeField, shape_field
from .shaping import ShapedRecord, has_properties, shape_data, shape_data_many
from .pagination import PagedList
from .parameters import ResourceParameters
from .uri_builder import ResourceUriBuilder, FlaskUriBuilder
from .links import Link, LinkFactory, ResourceLinkSpec, linked_resource, linked_collection
from .api import LibraAPI
from .app import create_app
from .__about__ import __version__, __description__

__all__ = (
    "__version__",
    "__description__",
    #
    "LIBRA",
    "LibraAPI",
    "create_app",
    # property mapping:
    "MappingEntry",
    "PropertyMappingTable",
    "PropertyMappingRegistry",
    "resolve_ordering",
    "apply_ordering",
    # shaping:
    "Shape",
    "ShapeField",
    "shape_field",
    "ShapedRecord",
    "has_properties",
    "shape_data",
    "shape_data_many",
    # paging and links:
    "PagedList",
    "ResourceParameters",
    "ResourceUriBuilder",
    "FlaskUriBuilder",
    "Link",
    "LinkFactory",
    "ResourceLinkSpec",
    "linked_resource",
    "linked_collection",
    # Errors:
    "LibraError",
    "ValidationError",
    "UnprocessableEntityError",
    "NotFoundError",
    "ConflictError",
    "GenericError",
    "SystemValidationError",
    "UnknownFieldError",
    "MappingNotFoundError",
    "MappingConflictError",
    # request
    "LibraRequest",
    "LibraJSONProvider",
)
