from .entity import Entity
from .indexed_entity import INDEX_ID, IndexedEntity, ListResult
from .entities import (
    ClientEntity,
    InvoiceEntity,
    MessageEntity,
    MilestoneEntity,
    ProjectEntity,
    UserEntity,
    WebsiteContentEntity,
)

__all__ = [
    "Entity",
    "IndexedEntity",
    "ListResult",
    "INDEX_ID",
    "WebsiteContentEntity",
    "UserEntity",
    "ClientEntity",
    "ProjectEntity",
    "MilestoneEntity",
    "InvoiceEntity",
    "MessageEntity",
]
