# Response class
from flask import Response
from .config import get_config


class LibraResponse(Response):
    """
    Response class
    """

    def use_vendor_media_type(self) -> "LibraResponse":
        """
        Label the response body as the hypermedia representation
        """
        self.headers["Content-Type"] = get_config("VENDOR_MEDIA_TYPE")
        return self
