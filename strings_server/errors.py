class StringsServerError(Exception):
    """Base class for all errors raised by strings_server."""


class ServiceError(StringsServerError):
    """A business logic failure.

    These are reported to the client inside the response body, never as an HTTP error.
    """


class EmptyInputError(ServiceError):
    """The input string was empty."""

    def __init__(self) -> None:
        super().__init__("empty string")


class TransportError(StringsServerError):
    """A failure while moving a request or response across the HTTP boundary."""

    status_code: int = 500


class DecodeError(TransportError):
    """The request body could not be read or parsed."""

    status_code = 400


class EncodeError(TransportError):
    """The response could not be serialized."""

    status_code = 500
