"""did:key resolution."""

import json
import logging
from dataclasses import dataclass, field
from typing import Optional

from .const import DID_CONTEXT, METHOD_NAME, MKEY_CONTEXT
from .core.did_url import DIDUrl
from .did import did_key_multikey, parse_did_key

LOGGER = logging.getLogger(__name__)

DID_CONTENT_TYPE = "application/did+ld+json"
RESOLUTION_CONTEXT = "https://w3id.org/did-resolution/v1"

VERIFICATION_RELATIONSHIPS = (
    "authentication",
    "assertionMethod",
    "capabilityInvocation",
    "capabilityDelegation",
)


class ResolutionError(Exception):
    """A DID resolution or dereferencing failure."""

    def __init__(self, error: str, message: Optional[str] = None):
        super().__init__(message or error)
        self.error = error
        self.message = message

    def serialize(self) -> dict:
        return {
            "error": self.error,
            "errorMessage": self.message,
            "contentType": DID_CONTENT_TYPE,
        }


@dataclass
class ResolutionResult:
    document: Optional[dict] = None
    document_metadata: Optional[dict] = None
    resolution_metadata: dict = field(default_factory=dict)

    @classmethod
    def failed(cls, err: ResolutionError) -> "ResolutionResult":
        return ResolutionResult(resolution_metadata=err.serialize())

    def serialize(self) -> dict:
        return {
            "@context": RESOLUTION_CONTEXT,
            "didDocument": self.document,
            "didDocumentMetadata": self.document_metadata,
            "didResolutionMetadata": self.resolution_metadata,
        }


@dataclass
class DereferencingResult:
    dereferencing_metadata: dict
    content: str = ""
    content_metadata: Optional[dict] = None

    @classmethod
    def failed(cls, err: ResolutionError) -> "DereferencingResult":
        return DereferencingResult(dereferencing_metadata=err.serialize())

    def serialize(self) -> dict:
        return {
            "@context": RESOLUTION_CONTEXT,
            "dereferencingMetadata": self.dereferencing_metadata,
            "content": self.content,
            "contentMetadata": self.content_metadata or {},
        }


def did_document(did: str) -> dict:
    """Expand a did:key identifier into its DID document.

    Raises:
        ValueError: if the identifier is not a valid did:key

    """
    parse_did_key(did)
    multikey = did_key_multikey(did)
    kid = f"{did}#{multikey}"
    doc = {
        "@context": [DID_CONTEXT, MKEY_CONTEXT],
        "id": did,
        "verificationMethod": [
            {
                "id": kid,
                "type": "Multikey",
                "controller": did,
                "publicKeyMultibase": multikey,
            }
        ],
    }
    for rel in VERIFICATION_RELATIONSHIPS:
        doc[rel] = [kid]
    return doc


def _resolve(didurl: DIDUrl) -> dict:
    if didurl.method != METHOD_NAME:
        raise ResolutionError(
            "methodNotSupported", f"Unsupported DID method: {didurl.method}"
        )
    try:
        return did_document(didurl.did)
    except ValueError as err:
        raise ResolutionError("invalidDid", str(err)) from err


def resolve_did_key(did: str) -> ResolutionResult:
    """Resolve a did:key identifier to a DID resolution result."""
    try:
        try:
            didurl = DIDUrl.decode(did)
        except ValueError as err:
            raise ResolutionError("invalidDid", str(err)) from err
        if not didurl.is_root:
            raise ResolutionError("invalidDid", "Expected a DID, not a DID URL")
        document = _resolve(didurl)
    except ResolutionError as err:
        LOGGER.debug("Error resolving %s: %s", did, err)
        return ResolutionResult.failed(err)
    return ResolutionResult(
        document=document,
        document_metadata={},
        resolution_metadata={"contentType": DID_CONTENT_TYPE},
    )


def dereference(did_url: str) -> DereferencingResult:
    """Dereference a did:key DID URL to its document or a verification method."""
    try:
        try:
            didurl = DIDUrl.decode(did_url)
        except ValueError as err:
            raise ResolutionError("invalidDidUrl", str(err)) from err
        document = _resolve(didurl)
        if didurl.path or didurl.query:
            raise ResolutionError(
                "notFound", "DID URL paths and queries are not supported"
            )
        if not didurl.fragment:
            return DereferencingResult(
                dereferencing_metadata={"contentType": DID_CONTENT_TYPE},
                content=json.dumps(document),
                content_metadata={},
            )
        reft = didurl.did + didurl.fragment
        for method in document["verificationMethod"]:
            if method["id"] == reft:
                res = {"@context": document["@context"], **method}
                return DereferencingResult(
                    dereferencing_metadata={"contentType": DID_CONTENT_TYPE},
                    content=json.dumps(res),
                )
        raise ResolutionError("notFound", f"Reference not found: {reft}")
    except ResolutionError as err:
        LOGGER.debug("Error dereferencing %s: %s", did_url, err)
        return DereferencingResult.failed(err)
