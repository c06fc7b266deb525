# flask_restful API subclass
import logging
from functools import wraps
from typing import Callable, Dict, Iterable
import werkzeug
from flask import Flask
from flask_restful import Api, abort
import libra
from .config import get_config
from .errors import LibraError, SystemValidationError
from .resources import (
    AuthorAPI,
    AuthorCollectionAPI,
    AuthorCollectionsAPI,
    AuthorsAPI,
    BookAPI,
    BooksAPI,
    RootAPI,
)

HTTP_METHODS = ["GET", "POST", "PATCH", "DELETE", "PUT"]


class LibraAPI(Api):
    """
    Subclass of the flask_restful API class where we add the expose_library method.
    Every exposed resource registers the names of its routes, the link factory renders
    the links with these names.
    """

    def __init__(self, app: Flask, prefix: str = None, mappings=None, **kwargs) -> None:
        """
        :param app: Flask app
        :param prefix: url prefix of the api, e.g. "/api"
        :param mappings: frozen PropertyMappingRegistry
        """
        if prefix is None:
            prefix = get_config("API_PREFIX")
        # route name => flask endpoint
        self.routes: Dict[str, str] = {}
        app_db = kwargs.pop("app_db", None)
        libra.LIBRA(app, mappings=mappings, api=self, app_db=app_db)
        super().__init__(app, prefix=prefix, **kwargs)

    def add_resource(self, resource, *urls, route_names: Iterable[str] = (), **kwargs) -> None:
        """
        :param resource: flask_restful Resource subclass
        :param urls: urls, relative to the api prefix
        :param route_names: names used to build the links to this resource
        """
        endpoint = kwargs.setdefault("endpoint", resource.__name__)
        for url in urls:
            if not url.startswith("/"):  # pragma: no cover
                raise SystemValidationError("paths must start with a /")

        for route_name in route_names:
            if route_name in self.routes:
                raise SystemValidationError(f'Route "{route_name}" already exposed on {self.routes[route_name]}')
            self.routes[route_name] = endpoint

        # decorate a subclass, the resource classes are shared by all the apps
        api_class = api_decorator(type(resource.__name__, (resource,), {}))
        libra.log.info(f"Exposing {resource.__name__} on {self.prefix}{', '.join(urls)}, endpoint: {endpoint}")
        super().add_resource(api_class, *urls, **kwargs)

    def expose_library(self) -> None:
        """
        Create the url endpoints of the library resources
        """
        self.add_resource(RootAPI, "/", route_names=["GetRoot"])
        self.add_resource(AuthorsAPI, "/authors", route_names=["GetAuthors", "CreateAuthor"])
        self.add_resource(AuthorAPI, "/authors/<uuid:author_id>", route_names=["GetAuthor", "DeleteAuthor"])
        self.add_resource(AuthorCollectionsAPI, "/authorcollections", route_names=["CreateAuthorCollection"])
        self.add_resource(AuthorCollectionAPI, "/authorcollections/(<ids>)", route_names=["GetAuthorCollection"])
        self.add_resource(BooksAPI, "/authors/<uuid:author_id>/books", route_names=["GetBooksForAuthor", "CreateBookForAuthor"])
        self.add_resource(
            BookAPI,
            "/authors/<uuid:author_id>/books/<uuid:book_id>",
            route_names=["GetBookForAuthor", "DeleteBookForAuthor", "UpdateBookForAuthor", "PartiallyUpdateBookForAuthor"],
        )


def api_decorator(cls):
    """Decorator for the API views:
        - add generic exception handling

    :param cls: The class that will be decorated (e.g. AuthorsAPI)
    :return: decorated class
    """
    for method_name in [m.lower() for m in HTTP_METHODS]:
        method = getattr(cls, method_name, None)
        if not method:
            continue
        setattr(cls, method_name, http_method_decorator(method))
    return cls


def http_method_decorator(fun: Callable) -> Callable:
    """Decorator for the supported HTTP methods (get, post, put, patch, delete)
    - commit the database
    - convert all exceptions to a JSON serializable error

    This method will be called for all requests
    :param fun:
    :return: wrapped fun
    """

    @wraps(fun)
    def method_wrapper(*args, **kwargs):
        """Wrap the method and perform error handling
        :param *args:
        :param **kwargs:
        :return: result of the wrapped method
        """
        libra_exception = None
        status_code = 500
        message = ""
        try:
            result = fun(*args, **kwargs)
            libra.DB.session.commit()
            return result

        except LibraError as exc:
            if exc.status_code >= 500:
                libra.log.exception(exc)
            libra_exception = exc

        except werkzeug.exceptions.HTTPException as exc:
            status_code = exc.code
            message = exc.description
            libra.log.error(message)

        except Exception as exc:
            libra.log.exception(exc)
            libra_exception = exc
            if libra.log.getEffectiveLevel() > logging.DEBUG:
                message = "Logging Disabled"
            else:
                message = str(exc)

        status_code = getattr(libra_exception, "status_code", status_code)
        api_code = getattr(libra_exception, "api_code", status_code)
        title = getattr(libra_exception, "message", message)
        detail = getattr(libra_exception, "detail", title)

        libra.DB.session.rollback()
        errors = dict(title=title, detail=detail, code=str(api_code))
        abort(status_code, errors=[errors])

    return method_wrapper
