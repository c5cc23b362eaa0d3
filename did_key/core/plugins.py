"""Registry of supported multikey key types."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional

from multiformats import multicodec, varint

from ..const import P256_JWT_ALG, SECP256K1_JWT_ALG
from .curves import CurvePoints, p256, secp256k1
from .errors import UnsupportedKeyType


@dataclass(frozen=True)
class KeyTypeDescriptor:
    """A supported key type, identified by its multicodec prefix."""

    jwt_alg: str
    codec: str
    prefix: bytes
    jwk_crv: str
    compressed: bool
    compress: Callable[[bytes], bytes]
    decompress: Callable[[bytes], bytes]
    points: Optional[CurvePoints] = None

    @classmethod
    def for_curve(
        cls, jwt_alg: str, codec: str, points: CurvePoints
    ) -> "KeyTypeDescriptor":
        """Describe a key type stored as a compressed curve point."""
        return KeyTypeDescriptor(
            jwt_alg=jwt_alg,
            codec=codec,
            prefix=codec_prefix(codec),
            jwk_crv=points.name,
            compressed=True,
            compress=points.compress,
            decompress=points.decompress,
            points=points,
        )

    def coordinates(self, key_bytes: bytes) -> tuple[bytes, bytes]:
        """Extract the affine (x, y) coordinates of an uncompressed public key."""
        if not self.points:
            raise UnsupportedKeyType(
                f"No curve coordinates for key type: {self.jwt_alg}", self.jwt_alg
            )
        return self.points.coordinates(key_bytes)


def codec_prefix(codec: str) -> bytes:
    """Determine the varint-encoded multicodec prefix for a codec name."""
    try:
        code = multicodec.get(codec).code
    except KeyError:
        raise ValueError(f"Unsupported codec: {codec}") from None
    return varint.encode(code)


def check_registry(plugins: Sequence[KeyTypeDescriptor]):
    """Check that prefixes and algorithms identify key types unambiguously."""
    algs = set()
    for idx, plugin in enumerate(plugins):
        if plugin.jwt_alg in algs:
            raise ValueError(f"Duplicate key type algorithm: {plugin.jwt_alg}")
        algs.add(plugin.jwt_alg)
        for other in plugins[idx + 1 :]:
            if plugin.prefix.startswith(other.prefix) or other.prefix.startswith(
                plugin.prefix
            ):
                raise ValueError(
                    f"Ambiguous multicodec prefix: {plugin.codec}/{other.codec}"
                )


PLUGINS: tuple[KeyTypeDescriptor, ...] = (
    KeyTypeDescriptor.for_curve(P256_JWT_ALG, "p256-pub", p256),
    KeyTypeDescriptor.for_curve(SECP256K1_JWT_ALG, "secp256k1-pub", secp256k1),
)

check_registry(PLUGINS)


def find_by_prefix(
    data: bytes, plugins: Sequence[KeyTypeDescriptor] = PLUGINS
) -> Optional[KeyTypeDescriptor]:
    """Find the first key type whose prefix begins the given bytes."""
    for plugin in plugins:
        if data[: len(plugin.prefix)] == plugin.prefix:
            return plugin
    return None


def find_by_alg(
    jwt_alg: str, plugins: Sequence[KeyTypeDescriptor] = PLUGINS
) -> Optional[KeyTypeDescriptor]:
    """Find the key type for a JWT algorithm identifier."""
    for plugin in plugins:
        if plugin.jwt_alg == jwt_alg:
            return plugin
    return None
