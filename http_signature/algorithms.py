"""
Signature algorithms for HTTP request signing.

Algorithms are named ``<family>-<digest>``. The ``hmac`` family signs with a
shared secret; ``rsa`` and ``dsa`` sign with a PEM-encoded private key.
"""

import base64
import hashlib
import hmac
import re
from dataclasses import dataclass
from typing import Union

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import dsa, padding, rsa
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes

from http_signature.exceptions import InvalidAlgorithmError

ALGORITHMS = frozenset(
    {
        "rsa-sha1",
        "rsa-sha256",
        "rsa-sha512",
        "dsa-sha1",
        "hmac-sha1",
        "hmac-sha256",
        "hmac-sha512",
    }
)

DEFAULT_ALGORITHM = "rsa-sha256"

_ALGORITHM_PATTERN = re.compile(r"(hmac|rsa|dsa)-(\w+)")

_HASHLIB_DIGESTS = {
    "SHA1": hashlib.sha1,
    "SHA256": hashlib.sha256,
    "SHA512": hashlib.sha512,
}

_CRYPTOGRAPHY_DIGESTS = {
    "SHA1": hashes.SHA1,
    "SHA256": hashes.SHA256,
    "SHA512": hashes.SHA512,
}

Key = Union[str, bytes]


def _to_bytes(key: Key) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    return key


@dataclass(frozen=True)
class KeyedHash:
    """HMAC over the signing string with a shared secret."""

    digest: str

    def sign(self, data: bytes, key: Key) -> bytes:
        if self.digest not in _HASHLIB_DIGESTS:
            raise ValueError(f"Unsupported digest: {self.digest}")
        return hmac.new(_to_bytes(key), data, _HASHLIB_DIGESTS[self.digest]).digest()


@dataclass(frozen=True)
class AsymmetricSign:
    """RSA (PKCS#1 v1.5) or DSA signature with a PEM private key."""

    family: str
    digest: str

    @property
    def name(self) -> str:
        return f"{self.family}-{self.digest}".upper()

    def sign(self, data: bytes, key: Key) -> bytes:
        if self.digest not in _CRYPTOGRAPHY_DIGESTS:
            raise ValueError(f"Unsupported digest: {self.digest}")
        algorithm = _CRYPTOGRAPHY_DIGESTS[self.digest]()

        private_key = _load_private_key(_to_bytes(key))

        if self.family == "rsa":
            if not isinstance(private_key, rsa.RSAPrivateKey):
                raise ValueError("Key type mismatch: expected RSA private key")
            return private_key.sign(data, padding.PKCS1v15(), algorithm)

        if not isinstance(private_key, dsa.DSAPrivateKey):
            raise ValueError("Key type mismatch: expected DSA private key")
        return private_key.sign(data, algorithm)


SignatureAlgorithm = Union[KeyedHash, AsymmetricSign]


def _load_private_key(private_key_pem: bytes) -> PrivateKeyTypes:
    """Load a private key from PEM bytes."""
    return serialization.load_pem_private_key(private_key_pem, password=None)


def parse_algorithm(algorithm: str) -> SignatureAlgorithm:
    """
    Resolve an algorithm name into its signing variant.

    Args:
        algorithm: Name such as "rsa-sha256" or "HMAC-SHA1" (case-insensitive)

    Returns:
        KeyedHash for the hmac family, AsymmetricSign for rsa and dsa

    Raises:
        InvalidAlgorithmError: If the algorithm is not in the allow-list
    """
    algorithm = algorithm.lower()
    if algorithm not in ALGORITHMS:
        raise InvalidAlgorithmError(f"{algorithm} is not supported")

    family, digest = _ALGORITHM_PATTERN.fullmatch(algorithm).groups()
    if family == "hmac":
        return KeyedHash(digest=digest.upper())
    return AsymmetricSign(family=family, digest=digest.upper())


def compute_signature(
    signing_string: str,
    key: Key,
    algorithm: Union[str, SignatureAlgorithm],
) -> str:
    """
    Sign a signing string and return the base64-encoded signature.

    Args:
        signing_string: The canonical string to sign
        key: Shared secret (hmac) or PEM-encoded private key (rsa, dsa)
        algorithm: One of ALGORITHMS, or a variant returned by parse_algorithm

    Returns:
        Base64-encoded signature

    Raises:
        InvalidAlgorithmError: If the algorithm is not in the allow-list
        ValueError: If the key does not match the algorithm family or cannot be loaded
    """
    if isinstance(algorithm, str):
        algorithm = parse_algorithm(algorithm)
    signature = algorithm.sign(signing_string.encode("utf-8"), key)
    return base64.b64encode(signature).decode("ascii")


def generate_key_pair(
    family: str = "rsa",
    key_size: int = 2048,
) -> tuple[bytes, bytes]:
    """
    Generate a public/private key pair for the rsa or dsa family.

    Args:
        family: "rsa" (default) or "dsa"
        key_size: 2048, 3072 or 4096 for RSA; 1024, 2048, 3072 or 4096 for DSA

    Returns:
        Tuple of (private_key_pem, public_key_pem) as bytes

    Raises:
        ValueError: If the family or key size is not supported
    """
    private_key: PrivateKeyTypes
    if family == "rsa":
        if key_size not in (2048, 3072, 4096):
            raise ValueError(f"Invalid RSA key size: {key_size}. Use 2048, 3072, or 4096.")
        private_key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)
    elif family == "dsa":
        if key_size not in (1024, 2048, 3072, 4096):
            raise ValueError(f"Invalid DSA key size: {key_size}. Use 1024, 2048, 3072, or 4096.")
        private_key = dsa.generate_private_key(key_size=key_size)
    else:
        raise ValueError(f"Unsupported key family: {family}")

    private_key_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_key_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )

    return private_key_pem, public_key_pem
