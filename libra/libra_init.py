import logging
import os
import sys
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from .request import LibraRequest
from .response import LibraResponse
from .json_encoder import LibraJSONProvider
import flask.app
from typing import Any, Optional


class LIBRA:
    """This class configures the Flask application to serve the library resources
    :param app: a Flask application.
    :param mappings: the (frozen) PropertyMappingRegistry shared by all requests
    :param LOGLEVEL: loglevel configuration variable, values from logging module (0: trace, .. 50: critical)
    """

    # Configuration settings are stored as class variables
    DEFAULT_PAGE_NUMBER = 1
    DEFAULT_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 20
    DEFAULT_ORDER_BY = "Name"
    VENDOR_MEDIA_TYPE = "application/vnd.marvin.hateoas+json"
    PAGINATION_HEADER = "X-Pagination"
    API_PREFIX = "/api"
    LIBRA_SEED = False
    LOGLEVEL = logging.WARNING

    def __init__(self, app: flask.app.Flask, *args, **kwargs) -> None:
        """
        Constructor
        """
        self.app = app
        self.mappings = None
        self.api = None
        if app is not None:
            self.init_app(app, *args, **kwargs)

    def init_app(self, app: flask.app.Flask, mappings: Any = None, api: Any = None, app_db: Optional[SQLAlchemy] = None, **kwargs) -> None:
        """
        Application initialization: install the request, response and json classes
        and keep a reference to the process-wide configuration objects
        """
        if not isinstance(app, Flask):  # pragma: no cover
            raise TypeError("'app' should be Flask.")

        if app_db is None:
            app_db = app.extensions["sqlalchemy"]

        self.db = app_db
        self.mappings = mappings
        self.api = api

        app.request_class = LibraRequest
        app.response_class = LibraResponse
        app.json = LibraJSONProvider(app)
        app.url_map.strict_slashes = False

        if app.config.get("DEBUG", False):
            log.setLevel(logging.DEBUG)

        for conf_name, conf_val in kwargs.items():
            setattr(LIBRA, conf_name, conf_val)

        app.extensions["libra"] = self

    @staticmethod
    def init_logging(loglevel: int = logging.WARNING) -> logging.Logger:
        """
        Specify the log format used in the webserver logs
        The webserver will catch stdout so we redirect eveything to sys.stderr
        """
        log = logging.getLogger(__name__)
        if log.level == logging.NOTSET:
            handler = logging.StreamHandler(sys.stderr)
            formatter = logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s")
            handler.setFormatter(formatter)
            log.setLevel(loglevel)
            log.addHandler(handler)
        return log


def current_libra() -> LIBRA:
    """
    :return: the LIBRA instance registered with the current app
    """
    return flask.current_app.extensions["libra"]


#
# DB and logging initialization
#
DB = SQLAlchemy()

try:
    DEBUG = os.getenv("DEBUG", logging.WARNING)
    LOGLEVEL = int(DEBUG)
except ValueError:  # pragma: no cover
    print(f'Invalid LogLevel in DEBUG Environment Variable! "{DEBUG}"')
    LOGLEVEL = logging.INFO

log = LIBRA.init_logging(LOGLEVEL)
