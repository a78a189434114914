"""
HTTP Signatures for outgoing requests.

Signs a list of request headers with an HMAC secret or an RSA/DSA private key
and adds the resulting credential header to the request.

Basic Usage (RSA):
    from http_signature import Request, SigningOptions, sign_request

    request = Request("GET", "/foo", {"Host": "example.com"})
    sign_request(
        request,
        SigningOptions(key_id="my-key-1", key=private_key_pem, headers=["date", "host"]),
    )
    request.get_header("Signature")
    # keyId="my-key-1",algorithm="rsa-sha256",headers="date host",signature="..."

HMAC Usage:
    sign_request(
        request,
        {"keyId": "client-a", "key": "shared-secret", "algorithm": "hmac-sha256"},
    )

Older drafts:
    Draft "01" signs the request line and writes an Authorization header:

    sign_request(
        request,
        SigningOptions(key_id="k1", key=private_key_pem, headers=["request-line"], draft="01"),
    )
    request.get_header("Authorization")
    # Signature keyId="k1",algorithm="rsa-sha256",headers="request-line",signature="..."
"""

from http_signature.algorithms import (
    ALGORITHMS,
    DEFAULT_ALGORITHM,
    AsymmetricSign,
    KeyedHash,
    compute_signature,
    generate_key_pair,
    parse_algorithm,
)

from http_signature.drafts import (
    DEFAULT_DRAFT,
    DRAFTS,
    DraftPolicy,
    get_draft_policy,
)

from http_signature.exceptions import (
    HttpSignatureError,
    InvalidAlgorithmError,
    InvalidDraftError,
    MissingHeaderError,
    UsageError,
)

from http_signature.message import (
    Request,
    SignableMessage,
)

from http_signature.signer import (
    SigningOptions,
    build_signing_string,
    rfc1123_date,
    sign_request,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Signing
    "SigningOptions",
    "build_signing_string",
    "rfc1123_date",
    "sign_request",
    # Algorithms
    "ALGORITHMS",
    "DEFAULT_ALGORITHM",
    "AsymmetricSign",
    "KeyedHash",
    "compute_signature",
    "generate_key_pair",
    "parse_algorithm",
    # Drafts
    "DEFAULT_DRAFT",
    "DRAFTS",
    "DraftPolicy",
    "get_draft_policy",
    # Messages
    "Request",
    "SignableMessage",
    # Errors
    "HttpSignatureError",
    "InvalidAlgorithmError",
    "InvalidDraftError",
    "MissingHeaderError",
    "UsageError",
]
