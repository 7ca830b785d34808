"""
    acceptera.media_type
    ~~~~~~~~~~~~~~~~~~~~

    Single entries of an `Accept` header.

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
import re
import math
import logging

import mimeparse

from acceptera.exceptions import (
    InvalidMediaType, InvalidWeight, WeightOutOfRange,
)


log = logging.getLogger(__name__)


# RFC 7230 section 3.2.6
_token_re = re.compile(
    r'''
        ^
        [!#$%&'*+.^_`|~0-9a-zA-Z-]+
        $
    ''', re.VERBOSE
)


def parse_mime(value):
    """Validates a `type/subtype` string and returns it in normalised, lower
    case, form.

    Parameters are not part of a mime value and will be rejected.

    :raises InvalidMediaType: If `value` is not a valid mime type.
    """
    if not value or not value.strip():
        raise InvalidMediaType(value)

    try:
        type_, subtype, params = mimeparse.parse_mime_type(value)
    except ValueError as e:
        raise InvalidMediaType(value) from e

    if params:
        raise InvalidMediaType(value)

    for token in (type_, subtype):
        if _token_re.match(token) is None:
            raise InvalidMediaType(value)

    return '%s/%s' % (type_.lower(), subtype.lower())


class MediaType(object):
    """A mime type with an optional quality value.

    Media types are immutable.  Equality with another `MediaType` compares
    both the mime type and the weight, while equality with a string compares
    only the mime type.  Ordering compares only the quality.

    `mime`
        A `type/subtype` string.  Will be normalised to lower case.

    `weight`
        Either `None` or a number between `0.0` and `1.0` inclusive.
        A missing weight is treated as the HTTP default of `1.0` when
        ordering.
    """
    def __init__(self, mime, weight=None):
        self._mime = parse_mime(mime)

        if weight is not None:
            weight = float(weight)
            if math.isnan(weight) or not 0.0 <= weight <= 1.0:
                raise WeightOutOfRange(weight)
        self._weight = weight

    @property
    def mime(self):
        return self._mime

    @property
    def weight(self):
        return self._weight

    @property
    def type(self):
        type, _ = self._mime.split('/')
        return type

    @property
    def subtype(self):
        _, subtype = self._mime.split('/')
        return subtype

    @property
    def is_wildcard(self):
        return self.type == '*'

    @property
    def quality(self):
        if self._weight is None:
            return 1.0
        return self._weight

    def with_weight(self, weight):
        """Returns a copy of this media type with a different weight.
        """
        return type(self)(self._mime, weight)

    def __eq__(self, other):
        if isinstance(other, MediaType):
            return (
                self._mime == other._mime and
                self._weight == other._weight
            )
        if isinstance(other, str):
            try:
                return self._mime == parse_mime(other)
            except InvalidMediaType:
                return False
        return NotImplemented

    def __hash__(self):
        return hash(self._mime)

    def __lt__(self, other):
        if not isinstance(other, MediaType):
            return NotImplemented
        return self.quality < other.quality

    def __le__(self, other):
        if not isinstance(other, MediaType):
            return NotImplemented
        return self.quality <= other.quality

    def __gt__(self, other):
        if not isinstance(other, MediaType):
            return NotImplemented
        return self.quality > other.quality

    def __ge__(self, other):
        if not isinstance(other, MediaType):
            return NotImplemented
        return self.quality >= other.quality

    def __repr__(self):
        return '{name}(mime={mime!r}, weight={weight!r})'.format(
            name=self.__class__.__name__,
            mime=self._mime,
            weight=self._weight,
        )

    def __str__(self):
        return self.to_header()

    def to_header(self):
        """Returns a string suitable for use as an entry in an `Accept` header.
        """
        header = self._mime

        if self._weight is not None:
            header += ';q=%s' % self._weight

        return header


def parse_media_type(string):
    """Creates a new `MediaType` from a single `Accept` header entry.

    Only the first parameter is looked at, and only if it is a `q` parameter.
    Anything else after the mime type is ignored.

    :raises InvalidMediaType: If the mime type is malformed.
    :raises InvalidWeight: If the `q` parameter is not a number.
    :raises WeightOutOfRange: If the `q` parameter is not between `0` and `1`.
    """
    mime, *params = string.split(';')
    mime = parse_mime(mime.strip())

    weight = None
    if params:
        param = params[0].strip()
        if param.startswith('q='):
            value = param[len('q='):].strip()
            try:
                weight = float(value)
            except ValueError as e:
                log.debug("rejecting weight %r in %r", value, string)
                raise InvalidWeight(value) from e

    return MediaType(mime, weight)
