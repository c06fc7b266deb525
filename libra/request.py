"""
Content negotiation

Clients opt in to the hypermedia representation with the vendor media type:

    Accept: application/vnd.marvin.hateoas+json

Other Accept values get the plain json representation, with the paging information
in the X-Pagination header instead of the response body.
"""

from functools import cached_property
from typing import Optional
from flask import Request
import libra
from .config import get_config
from .errors import ValidationError
from .parameters import ResourceParameters
from .util import lower_keys


# pylint: disable=too-many-ancestors
class LibraRequest(Request):
    """
    Parse the library request arguments:
    - header: Accept may hold the vendor media type
    - query args: pageNumber, pageSize, orderBy, searchQuery, genre, fields
    - body: valid json
    """

    @cached_property
    def is_hateoas(self) -> bool:
        """
        :return: whether the client requested the hypermedia representation
        Only an explicit vendor media type counts (not */*), q=0 refuses it
        """
        vendor_type = get_config("VENDOR_MEDIA_TYPE").lower()
        return any(mimetype.lower() == vendor_type and quality > 0 for mimetype, quality in self.accept_mimetypes)

    @cached_property
    def resource_parameters(self) -> ResourceParameters:
        return ResourceParameters.from_args(self.args)

    @property
    def fields(self) -> Optional[str]:
        """
        :return: the "fields" query argument (the argument name is case-insensitive)
        """
        value = lower_keys(self.args.items()).get("fields", None)
        if value is None or not value.strip():
            return None
        return value.strip()

    def get_payload(self) -> dict:
        """
        :return: json request payload
        """
        result = self.get_json(silent=True)
        if result is None:
            libra.log.debug(f'Invalid payload for content type "{self.content_type}"')
            raise ValidationError("Invalid JSON Payload")
        return result
