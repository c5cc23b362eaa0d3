import base58
import pytest
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from did_key import (
    P256_JWT_ALG,
    SECP256K1_JWT_ALG,
    InvalidDidKeyPrefix,
    InvalidEncoding,
    InvalidPrefix,
    ParsedMultikey,
    UnsupportedKeyType,
    format_did_key,
    format_multikey,
    parse_did_key,
    parse_multikey,
)
from did_key.did import did_key_multikey

# https://w3c-ccg.github.io/did-method-key/#test-vectors
SECP256K1_VECTORS = [
    (
        "9085d2bef69286a6cbb51623c8fa258629945cd55ca705cc4e66700396894e0c",
        "did:key:zQ3shokFTS3brHcDQrn82RUDfCZESWL1ZdCEJwekUDPQiYBme",
    ),
    (
        "f0f4df55a2b3ff13051ea814a8f24ad00f2e469af73c363ac7e9fb999a9072ed",
        "did:key:zQ3shtxV1FrJfhqE1dvxYRcCknWNjHc3c5X1y3ZSoPDi2aur2",
    ),
    (
        "6b0b91287ae3348f8c2f2552d766f30e3604867e34adc37ccbb74a8e6b893e02",
        "did:key:zQ3shZc2QzApp2oymGvQbzP8eKheVshBHbU4ZYjeXqwSKEn6N",
    ),
]

P256_VECTORS = [
    (
        base58.b58decode("9p4VRzdmhsnq869vQjVCTrRry7u4TtfRxhvBFJTGU2Cp").hex(),
        "did:key:zDnaeTiq1PdzvZXUaMdezchcMJQpBdH2VN4pgrrEhMCCbmwSb",
    ),
]


def uncompressed_public_key(curve: ec.EllipticCurve, secret_hex: str) -> bytes:
    sk = ec.derive_private_key(int(secret_hex, 16), curve)
    return sk.public_key().public_bytes(Encoding.X962, PublicFormat.UncompressedPoint)


@pytest.mark.parametrize("secret,did", SECP256K1_VECTORS)
def test_secp256k1_vectors(secret: str, did: str):
    pk = uncompressed_public_key(ec.SECP256K1(), secret)
    assert len(pk) == 65
    assert parse_did_key(did) == ParsedMultikey(SECP256K1_JWT_ALG, pk)
    assert format_did_key(SECP256K1_JWT_ALG, pk) == did


@pytest.mark.parametrize("secret,did", P256_VECTORS)
def test_p256_vectors(secret: str, did: str):
    pk = uncompressed_public_key(ec.SECP256R1(), secret)
    assert parse_did_key(did) == ParsedMultikey(P256_JWT_ALG, pk)
    assert format_did_key(P256_JWT_ALG, pk) == did


@pytest.mark.parametrize(
    "jwt_alg,curve",
    [(P256_JWT_ALG, ec.SECP256R1()), (SECP256K1_JWT_ALG, ec.SECP256K1())],
)
def test_did_round_trip(jwt_alg: str, curve: ec.EllipticCurve):
    pk = uncompressed_public_key(curve, "0badc0de")
    did = format_did_key(jwt_alg, pk)
    assert did == "did:key:" + format_multikey(jwt_alg, pk)
    assert parse_did_key(did) == parse_multikey(format_multikey(jwt_alg, pk))
    assert parse_did_key(did).key_bytes == pk


@pytest.mark.parametrize(
    "did",
    [
        "did:web:example.com",
        "DID:key:zQ3shokFTS3brHcDQrn82RUDfCZESWL1ZdCEJwekUDPQiYBme",
        "zQ3shokFTS3brHcDQrn82RUDfCZESWL1ZdCEJwekUDPQiYBme",
        "",
    ],
)
def test_parse_invalid_did_prefix(did: str):
    with pytest.raises(InvalidDidKeyPrefix):
        parse_did_key(did)


def test_parse_invalid_multikey_prefix():
    with pytest.raises(InvalidPrefix) as exc:
        parse_did_key("did:key:Q3shokFTS3brHcDQrn82RUDfCZESWL1ZdCEJwekUDPQiYBme")
    assert not isinstance(exc.value, InvalidDidKeyPrefix)


@pytest.mark.parametrize("suffix", [" ", "\n", "\t\r\n"])
def test_parse_trailing_whitespace(suffix: str):
    did = SECP256K1_VECTORS[0][1]
    with pytest.raises(InvalidEncoding):
        parse_did_key(did + suffix)


def test_parse_whitespace_body():
    with pytest.raises(InvalidEncoding):
        parse_did_key("did:key:z ")


def test_format_unsupported_alg():
    with pytest.raises(UnsupportedKeyType):
        format_did_key("unknown-alg", b"\x04" + bytes(64))


def test_did_key_multikey():
    did = SECP256K1_VECTORS[0][1]
    assert did_key_multikey(did) == did.removeprefix("did:key:")
    with pytest.raises(InvalidDidKeyPrefix):
        did_key_multikey("did:web:example.com")
