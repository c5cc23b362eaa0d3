"""MultiKey format handling."""

import base64
from dataclasses import dataclass
from typing import ClassVar

import base58

from ..const import BASE58_MULTIBASE_PREFIX
from .errors import (
    InvalidEncoding,
    InvalidKeyEncoding,
    InvalidPrefix,
    UnsupportedKeyType,
)
from .plugins import find_by_alg, find_by_prefix

BASE58_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


@dataclass(frozen=True)
class ParsedMultikey:
    """An algorithm identifier paired with uncompressed public key bytes."""

    jwt_alg: str
    key_bytes: bytes

    def public_jwk(self) -> dict:
        """Represent the public key as a JWK."""
        plugin = find_by_alg(self.jwt_alg)
        if not plugin:
            raise UnsupportedKeyType(
                f"Unsupported key type: {self.jwt_alg}", self.jwt_alg
            )
        try:
            x, y = plugin.coordinates(self.key_bytes)
        except UnsupportedKeyType:
            raise
        except ValueError as err:
            raise InvalidKeyEncoding(str(err), self.key_bytes) from err
        return {"kty": "EC", "crv": plugin.jwk_crv, "x": _b64url(x), "y": _b64url(y)}


def parse_multikey(multikey: str) -> ParsedMultikey:
    """Decode a multikey string into its algorithm and uncompressed key bytes.

    Raises:
        InvalidPrefix: if the value is not base58btc multibase encoded
        InvalidEncoding: if the multibase body is not valid base58
        UnsupportedKeyType: if the multicodec prefix is not recognized
        InvalidKeyEncoding: if the key bytes cannot be decompressed

    """
    if not multikey.startswith(BASE58_MULTIBASE_PREFIX):
        raise InvalidPrefix(f"Incorrect prefix for multikey: {multikey}", multikey)
    body = multikey[len(BASE58_MULTIBASE_PREFIX) :]
    if not body:
        raise InvalidEncoding("Empty multikey value", multikey)
    if not BASE58_ALPHABET.issuperset(body):
        raise InvalidEncoding("Invalid base58 character in multikey", multikey)
    try:
        prefixed_bytes = base58.b58decode(body)
    except ValueError as err:
        raise InvalidEncoding(
            f"Invalid base58 encoding for multikey: {err}", multikey
        ) from err
    plugin = find_by_prefix(prefixed_bytes)
    if not plugin:
        raise UnsupportedKeyType("Unsupported key type", multikey)
    key_bytes = prefixed_bytes[len(plugin.prefix) :]
    if plugin.compressed:
        try:
            key_bytes = plugin.decompress(key_bytes)
        except ValueError as err:
            raise InvalidKeyEncoding(str(err), multikey) from err
    return ParsedMultikey(jwt_alg=plugin.jwt_alg, key_bytes=key_bytes)


def format_multikey(jwt_alg: str, key_bytes: bytes) -> str:
    """Encode public key bytes for a JWT algorithm as a multikey string.

    Raises:
        TypeError: if the key is not a bytes-like value
        UnsupportedKeyType: if the algorithm is not recognized
        InvalidKeyEncoding: if the key bytes cannot be compressed

    """
    if not isinstance(key_bytes, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes for public key, got: {type(key_bytes)}")
    plugin = find_by_alg(jwt_alg)
    if not plugin:
        raise UnsupportedKeyType("Unsupported key type", jwt_alg)
    key_bytes = bytes(key_bytes)
    if plugin.compressed:
        try:
            key_bytes = plugin.compress(key_bytes)
        except ValueError as err:
            raise InvalidKeyEncoding(str(err), key_bytes) from err
    prefixed_bytes = plugin.prefix + key_bytes
    return BASE58_MULTIBASE_PREFIX + base58.b58encode(prefixed_bytes).decode("ascii")


class MultiKey(str):
    """MultiKey string representation."""

    BASE: ClassVar[str] = BASE58_MULTIBASE_PREFIX

    @classmethod
    def from_public_key(cls, jwt_alg: str, pk: bytes) -> "MultiKey":
        """Encode public key bytes as a MultiKey."""
        return MultiKey(format_multikey(jwt_alg, pk))

    def decode(self) -> ParsedMultikey:
        """Decode this MultiKey into a JWT algorithm and public key."""
        return parse_multikey(self)


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")
