"""Error types raised by secret generation, token calls and claim decoding."""


class AppleSignInError(Exception):
    """Base class for every error raised by this library."""


class InvalidParameter(AppleSignInError):
    """A caller-supplied parameter is out of range."""


class InvalidKey(AppleSignInError):
    """The signing key could not be decoded or used to sign."""


class InvalidToken(AppleSignInError):
    """An identity token is not a well-formed JWT."""


class TransportFailure(AppleSignInError):
    """The HTTP round trip failed before a response was received."""


class RequestCancelled(TransportFailure):
    """The request was aborted by its deadline or the transport timeout."""


class DecodeFailure(AppleSignInError):
    """The response body of a token call is not a JSON token response."""


class ProviderRejected(AppleSignInError):
    """The provider refused the request.

    ``status_code`` and ``status_line`` are ``None`` when the request was
    rejected before any round trip, e.g. for an unparseable endpoint URL.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        status_line: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status_line = status_line
