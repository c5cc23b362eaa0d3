"""Multikey and did:key encoding of elliptic curve public keys."""

from .const import P256_JWT_ALG, SECP256K1_JWT_ALG
from .core.errors import (
    InvalidDidKeyPrefix,
    InvalidEncoding,
    InvalidKeyEncoding,
    InvalidPrefix,
    MultikeyError,
    UnsupportedKeyType,
)
from .core.multi_key import MultiKey, ParsedMultikey, format_multikey, parse_multikey
from .did import format_did_key, parse_did_key
from .resolver import ResolutionResult, resolve_did_key

__all__ = [
    "P256_JWT_ALG",
    "SECP256K1_JWT_ALG",
    "InvalidDidKeyPrefix",
    "InvalidEncoding",
    "InvalidKeyEncoding",
    "InvalidPrefix",
    "MultikeyError",
    "UnsupportedKeyType",
    "MultiKey",
    "ParsedMultikey",
    "format_multikey",
    "parse_multikey",
    "format_did_key",
    "parse_did_key",
    "ResolutionResult",
    "resolve_did_key",
]
