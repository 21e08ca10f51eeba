from .record_store import RecordStore
from .credential_verifier import CredentialVerifier

__all__ = [
    "RecordStore",
    "CredentialVerifier",
]
