"""
Sign HTTP requests with the HTTP signatures scheme.

Builds the signing string from the requested headers according to the
selected draft, signs it and writes the credential header onto the request.
"""

import logging
from dataclasses import dataclass, fields
from email.utils import formatdate
from typing import Any, Mapping, Optional, Sequence, Union

from http_signature.algorithms import DEFAULT_ALGORITHM, Key, compute_signature, parse_algorithm
from http_signature.drafts import DEFAULT_DRAFT, DraftPolicy, get_draft_policy
from http_signature.exceptions import MissingHeaderError, UsageError
from http_signature.message import SignableMessage

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = ("date",)
DEFAULT_HTTP_VERSION = "1.1"

_OPTION_ALIASES = {
    "keyId": "key_id",
    "httpVersion": "http_version",
    "draftVersion": "draft",
}


@dataclass
class SigningOptions:
    """Parameters for a single sign_request call."""

    key_id: str
    key: Key
    headers: Optional[Sequence[str]] = None
    algorithm: Optional[str] = None
    http_version: Optional[str] = None
    draft: Optional[str] = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "SigningOptions":
        """Build options from a dict, accepting camel-case aliases."""
        known = {f.name for f in fields(cls)}
        values = {}
        for name, value in options.items():
            name = _OPTION_ALIASES.get(name, name)
            if name not in known:
                raise UsageError(f"Unknown signing option: {name}")
            values[name] = value
        if "key_id" not in values:
            raise UsageError("options.key_id is required")
        values.setdefault("key", None)
        return cls(**values)


def rfc1123_date() -> str:
    """Current UTC time, e.g. "Mon, 19 Oct 2026 08:05:09 GMT"."""
    return formatdate(usegmt=True)


def _validate(options: SigningOptions) -> None:
    if not isinstance(options.key_id, str) or not options.key_id:
        raise UsageError("options.key_id must be a non-empty string")

    if not isinstance(options.key, (str, bytes)) or not options.key:
        raise UsageError("options.key is required")

    if options.headers is not None:
        if not isinstance(options.headers, (list, tuple)):
            raise UsageError("options.headers must be an array of Strings")
        if not all(isinstance(h, str) for h in options.headers):
            raise UsageError("options.headers must be an array of Strings")

    for name in ("algorithm", "http_version", "draft"):
        value = getattr(options, name)
        if value is not None and not isinstance(value, str):
            raise UsageError(f"options.{name} must be a string")


def build_signing_string(
    request: SignableMessage,
    headers: Sequence[str],
    policy: DraftPolicy,
    http_version: str = DEFAULT_HTTP_VERSION,
) -> str:
    """
    Build the canonical string for signing.

    Args:
        request: The request whose headers are signed
        headers: Header names in signing order (case-insensitive)
        policy: Draft policy deciding the pseudo-header form
        http_version: HTTP version for the request-line pseudo-header

    Returns:
        The newline-joined signing string

    Raises:
        MissingHeaderError: If a requested header has no value on the request
    """
    lines = []
    for header in headers:
        name = header.lower()
        if name == policy.special_header:
            lines.append(policy.special_contribution(request.method, request.path, http_version))
            continue

        value = request.get_header(name)
        if not value:
            raise MissingHeaderError(name)
        lines.append(f"{name}: {value}")

    return "\n".join(lines)


def sign_request(
    request: SignableMessage,
    options: Union[SigningOptions, Mapping[str, Any]],
) -> bool:
    """
    Add a signature header to a request.

    A Date header is added when the request has none. Every other header in
    options.headers must already be present.

    Args:
        request: The request to sign, modified in place
        options: SigningOptions, or a mapping with the same fields

    Returns:
        True once the signature header has been set

    Raises:
        UsageError: If the options are malformed
        InvalidDraftError: If the draft is not supported
        InvalidAlgorithmError: If the algorithm is not supported
        MissingHeaderError: If a header to be signed is not on the request.
            A Date header may already have been added.
    """
    if isinstance(options, Mapping):
        options = SigningOptions.from_mapping(options)
    _validate(options)

    policy = get_draft_policy(options.draft or DEFAULT_DRAFT)

    algorithm = (options.algorithm or DEFAULT_ALGORITHM).lower()
    parsed = parse_algorithm(algorithm)

    headers = list(options.headers) if options.headers is not None else list(DEFAULT_HEADERS)
    http_version = options.http_version or DEFAULT_HTTP_VERSION

    if not request.get_header("Date"):
        request.set_header("Date", rfc1123_date())

    logger.debug("signing headers: %s", headers)
    signing_string = build_signing_string(request, headers, policy, http_version)
    logger.debug("string to sign: %r", signing_string)
    logger.debug("alg: %s", parsed)

    signature = compute_signature(signing_string, options.key, parsed)

    request.set_header(
        policy.header_name,
        policy.render(options.key_id, algorithm, headers, signature),
    )
    return True
