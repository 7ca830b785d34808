"""
    acceptera.accept
    ~~~~~~~~~~~~~~~~

    Parsing of `Accept` headers and selection of the content type to serve.

    https://tools.ietf.org/html/rfc7231#section-5.3.2

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
import logging

from acceptera.exceptions import InvalidAcceptHeader, NotAcceptable
from acceptera.media_type import MediaType, parse_media_type


log = logging.getLogger(__name__)


def _normalize_content_type(content_type):
    mime, *_ = content_type.split(';')
    return mime.strip().lower()


class Accept(object):
    """A parsed `Accept` header.

    `types`
        Sequence of non-wildcard media types, most preferred first.

    `wildcard`
        Optional `*/*` media type used when none of `types` can be served.
    """
    def __init__(self, types=(), wildcard=None):
        self._types = []
        for media_type in types:
            if isinstance(media_type, str):
                media_type = parse_media_type(media_type)
            if media_type.is_wildcard:
                raise ValueError(
                    "wildcard %r in list of explicit types" % media_type
                )
            self._types.append(media_type)
        self._types = tuple(self._types)

        if isinstance(wildcard, str):
            wildcard = parse_media_type(wildcard)
        if wildcard is not None and not wildcard.is_wildcard:
            raise ValueError("%r is not a wildcard" % wildcard)
        self._wildcard = wildcard

    @classmethod
    def from_mime(cls, mime):
        """Creates an `Accept` object that accepts only `mime`.
        """
        media_type = MediaType(mime)
        if media_type.is_wildcard:
            return cls(wildcard=media_type)
        return cls([media_type])

    @property
    def types(self):
        return self._types

    @property
    def wildcard(self):
        return self._wildcard

    def negotiate(self, available):
        """Picks the content type to serve from the content types that the
        server is able to produce.

        :param available:
            Iterable of content type strings, in order of server preference.
            If only the wildcard matches then the first of these is returned.
            Case and parameters are ignored when matching.

        :return:
            The matching entry from `available`, unmodified.

        :raises NotAcceptable:
            If none of the available content types are acceptable.
        """
        index = {}
        for content_type in available:
            mime = _normalize_content_type(content_type)
            index.setdefault(mime, content_type)

        for media_type in self._types:
            if media_type.mime in index:
                log.debug("negotiated %r from %r", media_type.mime, self)
                return index[media_type.mime]

        if self._wildcard is not None and index:
            content_type = next(iter(index.values()))
            log.debug("falling back to %r for %r", content_type, self)
            return content_type

        log.debug(
            "no acceptable content type in %r for %r", list(index), self
        )
        raise NotAcceptable(
            description="None of %s can satisfy %r" % (
                ', '.join(index.values()) or 'nothing', self.to_header(),
            )
        )

    def quality(self, content_type):
        """Returns the quality the client has assigned to `content_type`, or
        `0` if the client does not accept it.
        """
        mime = _normalize_content_type(content_type)
        for media_type in self._types:
            if media_type.mime == mime:
                return media_type.quality

        if self._wildcard is not None:
            return self._wildcard.quality

        return 0

    def __contains__(self, content_type):
        return bool(self.quality(content_type))

    def __iter__(self):
        yield from self._types
        if self._wildcard is not None:
            yield self._wildcard

    def __len__(self):
        return len(self._types) + (self._wildcard is not None)

    def __eq__(self, other):
        if not isinstance(other, Accept):
            return NotImplemented
        return (
            self._wildcard == other._wildcard and
            self._types == other._types
        )

    __hash__ = None

    def __repr__(self):
        return '{name}(types={types!r}, wildcard={wildcard!r})'.format(
            name=self.__class__.__name__,
            types=list(self._types),
            wildcard=self._wildcard,
        )

    def __str__(self):
        return self.to_header()

    def to_header(self):
        """Return an equivalent string suitable for use as an `Accept` header.

        Explicit types are written out in order of preference, followed by
        the wildcard.
        """
        return ', '.join(media_type.to_header() for media_type in self)


def parse_accept_header(string):
    """Creates a new `Accept` object from an `Accept` header string.

    If the header contains more than one wildcard then the last one wins.
    Types without a weight of their own inherit the weight of the wildcard.

    :raises InvalidAcceptHeader:
        If any of the entries in the header can not be parsed.
    """
    wildcard = None
    types = []

    for part in string.split(','):
        try:
            media_type = parse_media_type(part.strip())
        except InvalidAcceptHeader:
            log.debug("rejecting accept header %r at %r", string, part)
            raise

        if media_type.is_wildcard:
            wildcard = media_type
        else:
            types.append(media_type)

    if wildcard is not None and wildcard.weight is not None:
        types = [
            media_type.with_weight(wildcard.weight)
            if media_type.weight is None else media_type
            for media_type in types
        ]

    # `sorted` is stable, including when reversed
    types = sorted(types, key=lambda media_type: media_type.quality,
                   reverse=True)

    return Accept(types, wildcard)
