# libra to json encoding

import datetime
import decimal
from uuid import UUID
from flask.json.provider import DefaultJSONProvider


class LibraJSONProvider(DefaultJSONProvider):
    """
    Flask JSON encoding
    """

    # shaped records are emitted in the order their fields were requested
    sort_keys = False

    # pylint: disable=too-many-return-statements
    @staticmethod
    def default(obj):
        """
        override the default json encoding
        :param obj: object to be encoded
        :return: encoded/serialized object
        """
        if isinstance(obj, datetime.datetime):
            return obj.isoformat(" ")
        if isinstance(obj, (datetime.date, datetime.time)):
            return obj.isoformat()
        if isinstance(obj, UUID):
            return str(obj)
        if isinstance(obj, decimal.Decimal):  # pragma: no cover
            return float(obj)
        if isinstance(obj, set):  # pragma: no cover
            return list(obj)
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        return DefaultJSONProvider.default(obj)
