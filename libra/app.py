#
# Application factory
#
from typing import Any, Mapping, Optional
from flask import Flask
import libra
from .api import LibraAPI
from .config import get_config
from .dtos import AuthorDto
from .libra_init import DB
from .models import Author
from .property_mapping import MappingEntry, PropertyMappingRegistry
from .seed import seed_library

DEFAULT_CONFIG = {
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "SQLALCHEMY_TRACK_MODIFICATIONS": False,
    # flask_restful adds "did you mean" hints to the 404 errors otherwise
    "ERROR_404_HELP": False,
}


def create_mappings() -> PropertyMappingRegistry:
    """
    :return: frozen registry with the sort key mappings of the exposed collections
    """
    mappings = PropertyMappingRegistry()
    mappings.register(
        AuthorDto,
        Author,
        {
            "Id": MappingEntry(["id"]),
            "Genre": MappingEntry(["genre"]),
            "Age": MappingEntry(["date_of_birth"], revert=True),
            "Name": MappingEntry(["first_name", "last_name"]),
        },
    )
    return mappings.freeze()


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    :param config: settings overriding the defaults, e.g. {"SQLALCHEMY_DATABASE_URI": "sqlite:///library.db"}
    :return: Flask app serving the library api
    """
    app = Flask("libra")
    app.config.update(DEFAULT_CONFIG)
    if config:
        app.config.update(config)

    DB.init_app(app)
    with app.app_context():
        DB.create_all()
        api = LibraAPI(app, mappings=create_mappings(), app_db=DB)
        api.expose_library()
        if get_config("LIBRA_SEED"):
            seed_library(DB.session)

    libra.log.info(f"Created library api on {api.prefix}")
    return app
