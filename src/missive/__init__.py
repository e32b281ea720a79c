"""Missive — immutable HTTP messages and URLs.

Requests, responses, and URLs are value objects: every ``with_*()``
call returns a new instance, or the same one when nothing changes.

Basic usage::

    from missive import RequestFactory

    request = RequestFactory().create_request("GET", "https://example.com/search?q=birds")
    request.header_line("Host")  # 'example.com'
    request.request_target  # '/search?q=birds'

    moved = request.with_url(request.url.with_host("example.org"))
    moved.header_line("Host")  # 'example.org'
"""

__version__ = "0.1.0"
__all__ = [
    "REASON_PHRASES",
    "ConfigurationError",
    "HeaderCollection",
    "InvalidMethod",
    "InvalidPort",
    "InvalidStatusCode",
    "InvalidURL",
    "Message",
    "MessageConfig",
    "MissiveError",
    "Request",
    "RequestFactory",
    "RequestMethod",
    "Response",
    "ResponseFactory",
    "ResponseStatus",
    "StreamFactory",
    "StringStream",
    "Url",
    "UrlFactory",
    "ValidationError",
    "parse_url",
]

# Public name -> defining module, resolved on first attribute access
_LAZY_IMPORTS: dict[str, str] = {
    "REASON_PHRASES": "missive.http.status",
    "ConfigurationError": "missive.errors",
    "HeaderCollection": "missive.http.headers",
    "InvalidMethod": "missive.errors",
    "InvalidPort": "missive.errors",
    "InvalidStatusCode": "missive.errors",
    "InvalidURL": "missive.errors",
    "Message": "missive.http.message",
    "MessageConfig": "missive.config",
    "MissiveError": "missive.errors",
    "Request": "missive.http.request",
    "RequestFactory": "missive.factories",
    "RequestMethod": "missive.http.status",
    "Response": "missive.http.response",
    "ResponseFactory": "missive.factories",
    "ResponseStatus": "missive.http.status",
    "StreamFactory": "missive.factories",
    "StringStream": "missive.http.streams",
    "Url": "missive.http.url",
    "UrlFactory": "missive.factories",
    "ValidationError": "missive.errors",
    "parse_url": "missive.http.urlparse",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import missive`` from pulling in anyio and idna until a name
    that needs them is used.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    value = getattr(importlib.import_module(module_name), name)
    globals()[name] = value
    return value
