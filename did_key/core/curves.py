"""Elliptic curve point compression for supported key types."""

from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

COMPRESSED_TAGS = (0x02, 0x03)


@dataclass(frozen=True)
class CurvePoints:
    """SEC1 point (de)compression for a single curve."""

    name: str
    curve: ec.EllipticCurve
    size: int

    @property
    def compressed_length(self) -> int:
        """The length of a compressed point encoding."""
        return 1 + self.size

    @property
    def uncompressed_length(self) -> int:
        """The length of an uncompressed point encoding."""
        return 1 + 2 * self.size

    def load(self, data: bytes) -> ec.EllipticCurvePublicKey:
        """Load a SEC1-encoded point (compressed or uncompressed).

        Raises:
            ValueError: if the encoding is malformed or not on the curve

        """
        data = bytes(data)
        if len(data) not in (self.compressed_length, self.uncompressed_length):
            raise ValueError(
                f"Invalid {self.name} public key length: {len(data)}"
            )
        try:
            return ec.EllipticCurvePublicKey.from_encoded_point(self.curve, data)
        except ValueError as err:
            raise ValueError(f"Invalid {self.name} public key: {err}") from None

    def compress(self, data: bytes) -> bytes:
        """Compress an encoded public key point."""
        return self.load(data).public_bytes(
            Encoding.X962, PublicFormat.CompressedPoint
        )

    def decompress(self, data: bytes) -> bytes:
        """Expand a compressed public key point to the uncompressed form."""
        if len(data) != self.compressed_length or data[0] not in COMPRESSED_TAGS:
            raise ValueError(
                f"Expected {self.compressed_length} byte compressed {self.name} pubkey"
            )
        return self.load(data).public_bytes(
            Encoding.X962, PublicFormat.UncompressedPoint
        )

    def coordinates(self, data: bytes) -> tuple[bytes, bytes]:
        """Extract the affine (x, y) coordinates of an encoded point."""
        numbers = self.load(data).public_numbers()
        return (
            numbers.x.to_bytes(self.size, "big"),
            numbers.y.to_bytes(self.size, "big"),
        )


p256 = CurvePoints(name="P-256", curve=ec.SECP256R1(), size=32)
secp256k1 = CurvePoints(name="secp256k1", curve=ec.SECP256K1(), size=32)
