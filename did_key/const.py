"""Constants for multikey and did:key handling."""

BASE58_MULTIBASE_PREFIX = "z"
DID_KEY_PREFIX = "did:key:"

METHOD_NAME = "key"

P256_JWT_ALG = "ES256"
SECP256K1_JWT_ALG = "ES256K"

DID_CONTEXT = "https://www.w3.org/ns/did/v1"
MKEY_CONTEXT = "https://w3id.org/security/multikey/v1"
