"""Custom exceptions for the Crossmint wallet client.

These never escape the public operations; they are converted into
``WalletError`` results at the edge of each call.
"""


class WalletClientError(Exception):
    """Base exception for wallet client errors.

    Attributes:
        code: Explicit error code, or None to use the operation's fallback.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class WalletValidationError(WalletClientError):
    """Raised when linked user or API key input is malformed."""

    pass


class WalletHttpError(WalletClientError):
    """Raised when the wallet service returns a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: str | None = None,
    ) -> None:
        super().__init__(message, code=code)
        self.status_code = status_code


class WalletTransportError(WalletClientError):
    """Raised on connection failures, timeouts or malformed response bodies."""

    pass
