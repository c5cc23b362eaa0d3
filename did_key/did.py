"""did:key identifier handling."""

from .const import DID_KEY_PREFIX
from .core.errors import InvalidDidKeyPrefix
from .core.multi_key import MultiKey, ParsedMultikey, format_multikey, parse_multikey


def parse_did_key(did: str) -> ParsedMultikey:
    """Decode a did:key identifier into its algorithm and public key bytes."""
    if not did.startswith(DID_KEY_PREFIX):
        raise InvalidDidKeyPrefix(f"Incorrect prefix for did:key: {did}", did)
    return parse_multikey(did[len(DID_KEY_PREFIX) :])


def format_did_key(jwt_alg: str, key_bytes: bytes) -> str:
    """Encode public key bytes as a did:key identifier."""
    return DID_KEY_PREFIX + format_multikey(jwt_alg, key_bytes)


def did_key_multikey(did: str) -> MultiKey:
    """Extract the multikey value of a did:key identifier without decoding it."""
    if not did.startswith(DID_KEY_PREFIX):
        raise InvalidDidKeyPrefix(f"Incorrect prefix for did:key: {did}", did)
    return MultiKey(did[len(DID_KEY_PREFIX) :])
