# Exception Handlers
#
# The application loglevel determines the level of detail shown to the user.
# If set to debug, too much sensitive info might be shown !
#
# The exceptions will be caught in http_method_decorator and formatted, for example:
# {
#      "title": "Validation Error: Invalid orderBy \"age asc,foo\"",
#      "detail": "Validation Error: Invalid orderBy \"age asc,foo\"",
#      "code": "400"
# }
#
# Client errors (4xx) always send their message back, server side errors (5xx)
# only do so in debug mode.
#
from http import HTTPStatus
from sqlalchemy.exc import DontWrapMixin
import libra
from .config import is_debug

HIDDEN_LOG = "(debug logging disabled)"


class LibraError(Exception, DontWrapMixin):
    """
    Base class for the errors converted to an http error response
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR.value
    message = ""

    def __init__(self, message="", status_code=None, api_code=None):
        """
        :param message: Message to be returned in the (json) body
        :param status_code: HTTP Status code
        :param api_code: API code
        """
        Exception.__init__(self, message)
        if status_code is not None:
            self.status_code = status_code
        if api_code is not None:
            self.api_code = api_code
        self.message = self.message + str(message)


class ValidationError(LibraError):
    """
    This exception is raised when invalid input has been detected (client side input)
    Always send back the message to the client in the response
    """

    status_code = HTTPStatus.BAD_REQUEST.value
    message = "Validation Error: "

    def __init__(self, message="", status_code=HTTPStatus.BAD_REQUEST.value, api_code=None):
        LibraError.__init__(self, message, status_code, api_code)
        libra.log.warning("ValidationError: %s", message)


class UnprocessableEntityError(ValidationError):
    """
    The payload was well-formed but its content is semantically invalid
    """

    status_code = HTTPStatus.UNPROCESSABLE_ENTITY.value

    def __init__(self, message="", status_code=HTTPStatus.UNPROCESSABLE_ENTITY.value, api_code=None):
        ValidationError.__init__(self, message, status_code, api_code)


class NotFoundError(LibraError):
    """
    This exception is raised when an item was not found
    """

    status_code = HTTPStatus.NOT_FOUND.value
    message = "NotFoundError: "

    def __init__(self, message="", status_code=HTTPStatus.NOT_FOUND.value, api_code=None):
        LibraError.__init__(self, message, status_code, api_code)
        libra.log.info("Not found: %s", message)


class ConflictError(LibraError):
    """
    The request conflicts with an existing resource (e.g. POST to an existing author)
    """

    status_code = HTTPStatus.CONFLICT.value
    message = "Conflict: "

    def __init__(self, message="", status_code=HTTPStatus.CONFLICT.value, api_code=None):
        LibraError.__init__(self, message, status_code, api_code)
        libra.log.warning("Conflict: %s", message)


class GenericError(LibraError):
    """
    This exception is raised when an error has been detected
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR.value  # 500
    message = "Generic Error: "

    def __init__(self, message, status_code=HTTPStatus.INTERNAL_SERVER_ERROR.value, api_code=None):
        libra.log.error("Generic Error: %s", message)
        if not is_debug():
            message = HIDDEN_LOG
        LibraError.__init__(self, message, status_code, api_code)


class SystemValidationError(LibraError):
    """
    This exception is raised when the server violates its own invariants (server side input),
    it is a defect and never the client's fault
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR.value
    message = "System Validation Error: "

    def __init__(self, message="", status_code=HTTPStatus.INTERNAL_SERVER_ERROR.value, api_code=None):
        libra.log.error("SystemValidationError: %s", message)
        if not is_debug():
            message = HIDDEN_LOG
        LibraError.__init__(self, message, status_code, api_code)


class UnknownFieldError(SystemValidationError):
    """
    Raised by the data shaper when asked for a field the shape doesn't declare:
    the request fields should have been validated before shaping
    """

    def __init__(self, shape, field_name):
        self.shape = shape
        self.field_name = field_name
        SystemValidationError.__init__(self, f'{getattr(shape, "__name__", shape)} has no field "{field_name}"')


class MappingNotFoundError(SystemValidationError):
    """
    No property mapping table has been registered for the requested shape pair
    """

    def __init__(self, source_shape, target_shape):
        self.source_shape = source_shape
        self.target_shape = target_shape
        SystemValidationError.__init__(
            self, f"Cannot find property mapping for <{_name(source_shape)},{_name(target_shape)}>"
        )


class MappingConflictError(SystemValidationError):
    """
    A property mapping table was registered twice, or after the registry was frozen
    """


def _name(shape):
    return getattr(shape, "__name__", str(shape))
