"""
Request abstraction consumed by the signer.

Any object exposing ``get_header``, ``set_header``, ``method`` and ``path``
can be signed. ``Request`` is a small in-memory implementation.
"""

from typing import Iterator, Optional, Protocol


class SignableMessage(Protocol):
    """What the signer needs from a request."""

    method: str
    path: str

    def get_header(self, name: str) -> Optional[str]: ...

    def set_header(self, name: str, value: str) -> None: ...


class Request:
    """
    HTTP request with case-insensitive headers.

    Header names keep the case of the most recent ``set_header`` call.

    Usage:
        request = Request("GET", "/foo", {"Host": "example.com"})
        request.get_header("host")  # "example.com"
    """

    def __init__(self, method: str, path: str = "/", headers: Optional[dict[str, str]] = None):
        self.method = method
        self.path = path
        self._headers: dict[str, tuple[str, str]] = {}
        for name, value in (headers or {}).items():
            self.set_header(name, value)

    def get_header(self, name: str) -> Optional[str]:
        entry = self._headers.get(name.lower())
        if entry is None:
            return None
        return entry[1]

    def set_header(self, name: str, value: str) -> None:
        self._headers[name.lower()] = (name, value)

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate over (name, value) pairs in insertion order."""
        return iter(list(self._headers.values()))
