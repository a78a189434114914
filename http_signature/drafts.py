"""
Draft registry for HTTP signature canonicalization.

Each supported draft of the HTTP signatures scheme maps to one policy that
decides the pseudo-header name, the header the signature is written to and
the template used to render it.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Sequence

from http_signature.exceptions import InvalidDraftError

REQUEST_TARGET = "(request-target)"
REQUEST_LINE = "request-line"

_PARAMS_TEMPLATE = 'keyId="%s",algorithm="%s",headers="%s",signature="%s"'


@dataclass(frozen=True)
class DraftPolicy:
    """Canonicalization and formatting rules of a single draft."""

    special_header: str
    header_name: str
    header_template: str

    def special_contribution(self, method: str, path: str, http_version: str) -> str:
        """
        Render the signing string line for the pseudo-header.

        The request-line form keeps the method exactly as given; the
        request-target form lowercases it.
        """
        if self.special_header == REQUEST_LINE:
            return f"{method} {path} HTTP/{http_version}"
        return f"{self.special_header}: {method.lower()} {path}"

    def render(self, key_id: str, algorithm: str, headers: Sequence[str], signature: str) -> str:
        """Fill the credential header template."""
        return self.header_template % (key_id, algorithm, " ".join(headers), signature)


DRAFTS = MappingProxyType(
    {
        "04": DraftPolicy(
            special_header=REQUEST_TARGET,
            header_name="Signature",
            header_template=_PARAMS_TEMPLATE,
        ),
        "03": DraftPolicy(
            special_header=REQUEST_TARGET,
            header_name="Signature",
            header_template=_PARAMS_TEMPLATE,
        ),
        "01": DraftPolicy(
            special_header=REQUEST_LINE,
            header_name="Authorization",
            header_template="Signature " + _PARAMS_TEMPLATE,
        ),
    }
)

DEFAULT_DRAFT = "04"


def get_draft_policy(draft: str) -> DraftPolicy:
    """
    Look up the policy for a draft version.

    Raises:
        InvalidDraftError: If the draft is not registered
    """
    try:
        return DRAFTS[draft]
    except KeyError:
        raise InvalidDraftError(f"draft {draft} is not supported") from None
