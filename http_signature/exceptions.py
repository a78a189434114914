"""
Exceptions raised while signing HTTP requests.

Failures from the underlying cryptographic primitives (malformed keys,
unsupported digests) are not wrapped and reach the caller as raised.
"""


class HttpSignatureError(Exception):
    """Base exception for all signing errors."""


class UsageError(HttpSignatureError, TypeError):
    """Raised when signing options have the wrong shape or are missing."""


class InvalidDraftError(HttpSignatureError, ValueError):
    """Raised when the requested draft version is not supported."""


class InvalidAlgorithmError(HttpSignatureError, ValueError):
    """Raised when the requested algorithm is not in the allow-list."""


class MissingHeaderError(HttpSignatureError):
    """Raised when a header to be signed is not present on the request."""

    def __init__(self, header: str):
        super().__init__(f"{header} was not in the request")
        self.header = header
