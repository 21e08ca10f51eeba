"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends

from clientportal.config import get_settings
from clientportal.application.interfaces import CredentialVerifier, RecordStore
from clientportal.application.services import (
    AuthService,
    ChatService,
    ClientService,
    ContentService,
    InvoiceService,
    ProjectService,
)
from clientportal.infrastructure.security.mock_credential_verifier import MockCredentialVerifier
from clientportal.infrastructure.storage.memory_record_store import InMemoryRecordStore


@lru_cache
def get_record_store() -> RecordStore:
    """Process-wide record store selected by ``record_store_backend``."""
    settings = get_settings()
    if settings.record_store_backend == "memory":
        return InMemoryRecordStore()

    from clientportal.infrastructure.database.session import async_session_factory
    from clientportal.infrastructure.database.repositories import SQLAlchemyRecordStore

    return SQLAlchemyRecordStore(async_session_factory)


def get_credential_verifier() -> CredentialVerifier:
    return MockCredentialVerifier()


async def get_auth_service(
    store: RecordStore = Depends(get_record_store),
    verifier: CredentialVerifier = Depends(get_credential_verifier),
) -> AsyncGenerator[AuthService, None]:
    """Provides an AuthService bound to the record store and credential verifier."""
    yield AuthService(store, verifier, get_settings())


async def get_client_service(
    store: RecordStore = Depends(get_record_store),
    verifier: CredentialVerifier = Depends(get_credential_verifier),
) -> AsyncGenerator[ClientService, None]:
    """Provides a ClientService bound to the record store and credential verifier."""
    yield ClientService(store, verifier, get_settings())


async def get_project_service(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[ProjectService, None]:
    yield ProjectService(store)


async def get_invoice_service(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[InvoiceService, None]:
    yield InvoiceService(store)


async def get_chat_service(
    store: RecordStore = Depends(get_record_store),
    auth_service: AuthService = Depends(get_auth_service),
) -> AsyncGenerator[ChatService, None]:
    """Provides a ChatService; it needs auth to provision the admin on first read."""
    yield ChatService(store, auth_service)


async def get_content_service(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[ContentService, None]:
    yield ContentService(store)
