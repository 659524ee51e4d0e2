import json
import logging
from collections.abc import Mapping
from urllib.parse import parse_qsl, urlsplit, SplitResult, ParseResult

from werkzeug.datastructures import ImmutableDict, ImmutableMultiDict
from werkzeug.http import parse_options_header

from .error import InvalidArgument, DuplicateHeader, IncompleteRequest

__all__ = ("Request", "RequestBuilder")

LOG = logging.getLogger(__name__)


def _is_blank(value):
    return value is None or not isinstance(value, str) or not value.strip()


def _compare(a, b):
    return (a > b) - (a < b)


class RequestUrlMixin:

    __slots__ = ()

    @property
    def _parsed_url(self):
        return urlsplit(self.uri_with_query)

    @property
    def scheme(self):
        return self._parsed_url.scheme

    @property
    def host(self):
        return self._parsed_url.netloc

    @property
    def path(self):
        return self._parsed_url.path

    @property
    def query_string(self):
        return self._parsed_url.query

    @property
    def query(self):
        return ImmutableMultiDict(parse_qsl(self.query_string, keep_blank_values=True))


class RequestHeadersMixin:

    __slots__ = ()

    @property
    def content_type(self):
        return self.headers.get("content-type", "")

    @property
    def _parsed_mimetype(self):
        name, options = parse_options_header(self.content_type)
        return name, options

    @property
    def mimetype(self):
        """Like content_type but without parameters (eg, without charset, type etc.).

        For example if the content type is text/html; charset=utf-8
        the mimetype would be 'text/html'.
        """
        return self._parsed_mimetype[0].lower()

    @property
    def mimetype_params(self):
        return self._parsed_mimetype[1]


class Request(RequestUrlMixin, RequestHeadersMixin):
    """Library-agnostic, immutable representation of an HTTP request.

    Instances are created by :meth:`RequestBuilder.build`, get a builder
    with :meth:`Request.builder`. Requests are totally ordered by comparing
    body, headers, method and uri_with_query in that sequence; equality
    and hash are derived from the same composite key.
    """

    __slots__ = ("_body", "_headers", "_method", "_uri_with_query", "_key")

    def __init__(self, builder: "RequestBuilder"):
        if not isinstance(builder, RequestBuilder):
            raise InvalidArgument("Request can only be created by RequestBuilder")
        builder._check_complete()
        headers = dict(builder._headers)
        fields = dict(
            _body=bytes(builder._body),
            _headers=ImmutableDict(headers),
            _method=builder._method,
            _uri_with_query=builder._uri_with_query,
        )
        fields["_key"] = (
            fields["_body"],
            tuple(sorted(headers.items())),
            fields["_method"],
            fields["_uri_with_query"],
        )
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    @staticmethod
    def builder():
        """Returns a fresh :class:`RequestBuilder`"""
        return RequestBuilder()

    def __reduce__(self):
        return (_rebuild, (self._body, dict(self._headers), self._method, self._uri_with_query))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def body(self) -> bytes:
        return self._body

    @property
    def headers(self) -> ImmutableDict:
        return self._headers

    @property
    def method(self) -> str:
        return self._method

    @property
    def uri_with_query(self) -> str:
        return self._uri_with_query

    def compare_to(self, other: "Request") -> int:
        """Compare field by field: body, headers, method, uri_with_query.

        Returns a negative number, zero or a positive number as this request
        is less than, equal to or greater than the other one.
        """
        if not isinstance(other, Request):
            raise TypeError(f"can not compare Request with {type(other).__name__}")
        for a, b in zip(self._key, other._key):
            result = _compare(a, b)
            if result != 0:
                return result
        return 0

    def __eq__(self, other):
        if not isinstance(other, Request):
            return NotImplemented
        return self.compare_to(other) == 0

    def __ne__(self, other):
        if not isinstance(other, Request):
            return NotImplemented
        return self.compare_to(other) != 0

    def __lt__(self, other):
        if not isinstance(other, Request):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not isinstance(other, Request):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Request):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Request):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self):
        return hash(self._key)

    def to_dict(self):
        return {
            "body": self._body.decode("utf-8", "backslashreplace"),
            "headers": dict(sorted(self._headers.items())),
            "method": self._method,
            "uriWithQuery": self._uri_with_query,
        }

    def __str__(self):
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def __repr__(self):
        return f"<{type(self).__name__} {self._method} {self._uri_with_query}>"


class RequestBuilder:
    """Mutable staging object for :class:`Request`.

    Every setter validates its input eagerly and returns the builder, so
    calls can be chained. A builder is meant to be used once, from one
    thread.
    """

    def __init__(self):
        self._body = b""
        self._headers = {}
        self._method = None
        self._uri_with_query = None

    def __repr__(self):
        return f"<{type(self).__name__} {self._method} {self._uri_with_query}>"

    def set_body(self, body) -> "RequestBuilder":
        """Sets content of the request body, empty by default.

        The body is copied, later changes to a mutable buffer such as
        bytearray will not affect the request.
        """
        if body is None:
            raise InvalidArgument("body cannot be blank")
        if isinstance(body, str):
            raise InvalidArgument("body should be bytes-like, not str")
        try:
            self._body = memoryview(body).tobytes()
        except TypeError as ex:
            msg = f"body should be bytes-like, type {type(body).__name__} is not supported"
            raise InvalidArgument(msg) from ex
        return self

    def add_header(self, name: str, value: str) -> "RequestBuilder":
        """Adds a single header, can be called multiple times.

        NOTE: header names are lower-cased for storage. Header names are
        case-insensitive in HTTP and signing does not support multiple
        headers with the same name, so a duplicate is rejected here.

        Raises:
            InvalidArgument: name or value is empty
            DuplicateHeader: header with the same name already added
        """
        if _is_blank(name):
            raise InvalidArgument("header name cannot be empty")
        if _is_blank(value):
            raise InvalidArgument("header value cannot be empty")
        name = name.lower()
        if name in self._headers:
            LOG.debug("Rejected duplicate header %r", name)
            raise DuplicateHeader(name)
        self._headers[name] = value
        return self

    def add_headers(self, headers: Mapping) -> "RequestBuilder":
        """Adds headers from a mapping, in its iteration order"""
        if headers is None:
            raise InvalidArgument("headers cannot be null")
        if not isinstance(headers, Mapping):
            raise InvalidArgument(f"headers should be a mapping, not {type(headers).__name__}")
        for name, value in headers.items():
            self.add_header(name, value)
        return self

    def set_method(self, method: str) -> "RequestBuilder":
        """Sets HTTP method: GET, PUT, POST, DELETE. Mandatory to set."""
        if _is_blank(method):
            raise InvalidArgument("method cannot be blank")
        self._method = method
        return self

    def set_uri_with_query(self, uri) -> "RequestBuilder":
        """Sets absolute URI including query string. Mandatory to set."""
        if uri is None:
            raise InvalidArgument("uri_with_query cannot be blank")
        if isinstance(uri, (SplitResult, ParseResult)):
            uri = uri.geturl()
        if not isinstance(uri, str):
            msg = f"uri_with_query should be str, type {type(uri).__name__} is not supported"
            raise InvalidArgument(msg)
        try:
            urlsplit(uri)
        except ValueError as ex:
            raise InvalidArgument(f"invalid uri_with_query {uri!r}: {ex}") from ex
        self._uri_with_query = uri
        return self

    def _check_complete(self):
        if self._body is None:
            raise IncompleteRequest("body")
        if _is_blank(self._method):
            raise IncompleteRequest("method")
        if self._uri_with_query is None:
            raise IncompleteRequest("uri_with_query")

    def build(self) -> Request:
        """Returns a newly-created immutable request

        Raises:
            IncompleteRequest: method or uri_with_query not set
        """
        request = Request(self)
        LOG.debug("Built %r with %d headers", request, len(request.headers))
        return request


def _rebuild(body, headers, method, uri_with_query):
    return (
        RequestBuilder()
        .set_body(body)
        .add_headers(headers)
        .set_method(method)
        .set_uri_with_query(uri_with_query)
        .build()
    )
