# Configuration settings should be set in app.config
# The LIBRA class attributes hold the defaults, environment variables may override them
# when no application is active
import os
import logging
from flask import current_app
import libra
from typing import Any, Optional


def get_config(option: str) -> Optional[Any]:
    """Retrieve a configuration parameter from the app
    :param option: configuration parameter
    :return: configuration value

    Lookup order: current_app.config, environment, LIBRA class attribute.
    Environment values are cast to the type of the LIBRA default.
    """
    try:
        return current_app.config[option]
    except (KeyError, RuntimeError):
        # KeyError: not set in the app config, RuntimeError: no app context
        pass

    default = getattr(libra.LIBRA, option, None)
    env_value = os.environ.get(option, None)
    if env_value is None:
        return default
    if isinstance(default, bool):
        return env_value.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(default, int):
        try:
            return int(env_value)
        except ValueError:
            libra.log.warning(f'Invalid value for {option} in environment: "{env_value}"')
            return default
    return env_value


def is_debug() -> bool:
    """
    We use the loglevel to check whether we're running in debug mode
    :return: whether the app is in debug mode
    :rtype: Boolean
    """
    return libra.log.getEffectiveLevel() < logging.INFO
