"""
    acceptera
    ~~~~~~~~~

    :copyright: (c) 2016 by Ben Mather.
    :license: BSD, see LICENSE for more details.
"""
from acceptera.media_type import MediaType, parse_media_type
from acceptera.accept import Accept, parse_accept_header
from acceptera.exceptions import (
    InvalidAcceptHeader, InvalidMediaType, InvalidWeight, WeightOutOfRange,
    NotAcceptable,
)

__all__ = [
    'MediaType', 'parse_media_type', 'Accept', 'parse_accept_header',
    'InvalidAcceptHeader', 'InvalidMediaType', 'InvalidWeight',
    'WeightOutOfRange', 'NotAcceptable',
]
