"""Missive exception hierarchy.

Shared across Url, the message types, the parser, and the factories so
every module raises and catches the same types.
"""


class MissiveError(Exception):
    """Base for all missive-specific errors."""


class ConfigurationError(MissiveError):
    """Raised when a ``MessageConfig`` is invalid."""


class ValidationError(MissiveError, ValueError):
    """A value was rejected at a construction or ``with_*()`` boundary.

    Also a ``ValueError`` so callers that only know the builtin hierarchy
    can still catch it.
    """


class InvalidURL(ValidationError):  # noqa: N818 — matches the httpx/urllib3 spelling
    """A URL string or URL component could not be accepted."""


class InvalidPort(InvalidURL):  # noqa: N818
    """Port outside the TCP range 1-65535."""

    def __init__(self, port: int) -> None:
        super().__init__(f"Invalid port {port!r}: must be between 1 and 65535")
        self.port = port


class InvalidMethod(ValidationError):  # noqa: N818
    """Request method outside the supported set.

    The message lists the accepted methods for developer visibility.
    """

    def __init__(self, method: object, allowed: tuple[str, ...] = ()) -> None:
        detail = f"Invalid request method {method!r}"
        if allowed:
            detail = f"{detail}. Allowed methods: {', '.join(allowed)}"
        super().__init__(detail)
        self.method = method


class InvalidStatusCode(ValidationError):  # noqa: N818
    """Response status code outside 100-599."""

    def __init__(self, status_code: object) -> None:
        super().__init__(f"Invalid status code {status_code!r}: must be between 100 and 599")
        self.status_code = status_code
