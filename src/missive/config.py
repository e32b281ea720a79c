"""Message construction defaults.

MessageConfig is a frozen dataclass — immutable after creation, passed to
the factories instead of module-level globals.
"""

from dataclasses import dataclass

from missive.errors import ConfigurationError
from missive.http.urlparse import MAX_URL_LENGTH


@dataclass(frozen=True, slots=True)
class MessageConfig:
    """Defaults used by the factories. Immutable after creation.

    Override what you need::

        config = MessageConfig(protocol_version="2")
        factory = RequestFactory(config=config)
    """

    # Protocol version stamped on every message a factory builds
    protocol_version: str = "1.1"

    # Longest URL string the parser accepts
    max_url_length: int = MAX_URL_LENGTH

    # Text encoding for string-backed body streams
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not self.protocol_version:
            msg = "protocol_version must be a non-empty string"
            raise ConfigurationError(msg)
        if self.max_url_length <= 0:
            msg = f"max_url_length must be positive, got {self.max_url_length}"
            raise ConfigurationError(msg)
