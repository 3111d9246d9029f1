from __future__ import annotations


class BridgeError(Exception):
    """Base error for a failed request execution.

    ``kind`` names the failure class, ``message`` carries the diagnostic text
    produced by the method parser or the transport.
    """

    kind = "BridgeError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidMethod(BridgeError):
    """Method text is not an HTTP method token. Raised before any network I/O."""

    kind = "InvalidMethod"


class TransportError(BridgeError):
    """Connection, transmission, reception or body draining failed."""

    kind = "TransportError"
