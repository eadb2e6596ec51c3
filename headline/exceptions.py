class NewsSearchError(Exception):
    """Base class for failures that end a search request with a 500."""

    public_message = "Internal server error"


class InputError(NewsSearchError):
    """Raised when the page query parameter is not an integer."""

    public_message = "Unexpected server error"


class ConfigurationError(NewsSearchError):
    """Raised when the News API key is missing at request time."""


class TransportError(NewsSearchError):
    """Raised when the News API cannot be reached."""


class DecodeError(NewsSearchError):
    """Raised when a successful News API response body is malformed."""


class UpstreamProtocolError(NewsSearchError):
    """Raised when a failed News API response carries no readable error envelope."""

    public_message = "Unexpected server error"


class UpstreamRejection(NewsSearchError):
    """Raised when the News API rejects a request with an error envelope.

    The upstream message is shown to the user verbatim.
    """

    def __init__(self, message: str, code: str = ""):
        super().__init__(message)
        self.code = code

    @property
    def public_message(self) -> str:
        return str(self)
