"""
    acceptera.exceptions
    ~~~~~~~~~~~~~~~~~~~~

    Errors raised while parsing `Accept` headers and negotiating content
    types.

    Parse errors are `400 Bad Request` responses and failed negotiation is a
    `406 Not Acceptable` response, so a WSGI application can hand either
    straight back to the client.

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
from werkzeug.exceptions import BadRequest, NotAcceptable


__all__ = [
    'InvalidAcceptHeader', 'InvalidMediaType', 'InvalidWeight',
    'WeightOutOfRange', 'NotAcceptable',
]


class InvalidAcceptHeader(BadRequest, ValueError):
    """Base class for errors raised while parsing an `Accept` header.

    `value`
        The part of the header that could not be parsed.
    """
    message = "Invalid Accept header: %s"

    def __init__(self, value, description=None):
        self.value = value
        if description is None:
            description = self.message % (value,)
        super(InvalidAcceptHeader, self).__init__(description=description)


class InvalidMediaType(InvalidAcceptHeader):
    message = "Invalid media type: %s"


class InvalidWeight(InvalidAcceptHeader):
    message = "Invalid weight: %s"


class WeightOutOfRange(InvalidAcceptHeader):
    message = "Weight should be 0.0-1.0. Got %s"
