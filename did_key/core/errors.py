"""Multikey codec errors."""


class MultikeyError(ValueError):
    """Base class for multikey and did:key encoding errors."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


class InvalidPrefix(MultikeyError):
    """The value does not begin with the expected multibase prefix."""


class InvalidDidKeyPrefix(InvalidPrefix):
    """The value does not begin with the did:key method prefix."""


class InvalidEncoding(MultikeyError):
    """The multibase body could not be decoded."""


class UnsupportedKeyType(MultikeyError):
    """No registered key type matches the multicodec prefix or algorithm."""


class InvalidKeyEncoding(MultikeyError):
    """The key bytes were rejected by the curve point (de)compression."""
