"""DID URL format handling."""

import re
from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass(frozen=True)
class DIDUrl:
    """A DID URL as defined by Decentralized Identifiers 1.0.

    The path, query and fragment components keep their leading delimiter.
    """

    PATTERN: ClassVar[re.Pattern] = re.compile(
        r"^did:([a-z0-9]+):((?:[a-zA-Z0-9%_\.\-]*:)*[a-zA-Z0-9%_\.\-]+)$"
    )

    method: str
    identifier: str
    path: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None

    @classmethod
    def decode(cls, url: str) -> "DIDUrl":
        """Decode a string as a DID URL.

        Raises:
            ValueError: on invalid inputs

        """
        url, sep, fragment = url.partition("#")
        url, qsep, query = url.partition("?")
        if (pos := url.find("/")) >= 0:
            url, path = url[:pos], url[pos:]
        else:
            path = None
        parts = cls.PATTERN.match(url)
        if not parts:
            raise ValueError(f"Invalid DID URL: {url}")
        return DIDUrl(
            method=parts[1],
            identifier=parts[2],
            path=path,
            query=qsep + query if qsep else None,
            fragment=sep + fragment if sep else None,
        )

    @property
    def did(self) -> str:
        """Access the root DID identifier for this DID URL."""
        return f"did:{self.method}:{self.identifier}"

    @property
    def is_root(self) -> bool:
        """Check whether this DID URL is a plain DID."""
        return not (self.path or self.query or self.fragment)

    def __str__(self) -> str:
        parts = (self.path, self.query, self.fragment)
        return self.did + "".join(p for p in parts if p)
