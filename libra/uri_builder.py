#
# ResourceUriBuilder: renders the uri of a named route
#
# The link factory doesn't know anything about flask routing, it receives a builder
# satisfying the ResourceUriBuilder protocol. The route names are registered by LibraAPI
# when the resources are exposed.
#
from typing import Any, Dict, Mapping, Optional, Protocol
from flask import url_for
from werkzeug.routing import BuildError
import libra
from .errors import SystemValidationError


class ResourceUriBuilder(Protocol):
    def build(self, route_name: str, params: Optional[Mapping[str, Any]] = None) -> str:
        ...


def clean_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    :return: the parameters without the None and "" values, in their original order
    """
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None and value != ""}


class FlaskUriBuilder:
    """
    Build uris with flask.url_for
    """

    def __init__(self, routes: Mapping[str, str], external: bool = True) -> None:
        """
        :param routes: route name => flask endpoint
        :param external: render absolute uris
        """
        self.routes = routes
        self.external = external

    def build(self, route_name: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        :param route_name: name of the route, e.g. "GetAuthors"
        :param params: url and query string parameters
        :return: uri of the route
        """
        endpoint = self.routes.get(route_name, None)
        if endpoint is None:
            raise SystemValidationError(f'Unknown route "{route_name}"')
        try:
            return url_for(endpoint, _external=self.external, **clean_params(params))
        except BuildError as exc:
            libra.log.exception(exc)
            raise SystemValidationError(f'Cannot build route "{route_name}": {exc}')
