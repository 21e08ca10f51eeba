"""Concrete entity types — one per persisted record shape."""

from clientportal.application.persistence.entity import Entity
from clientportal.application.persistence.indexed_entity import IndexedEntity
from clientportal.domain.records import (
    Client,
    Invoice,
    Message,
    Milestone,
    Project,
    User,
    WebsiteContent,
)


class WebsiteContentEntity(Entity[WebsiteContent]):
    entity_name = "websiteContent"
    state_type = WebsiteContent


class UserEntity(IndexedEntity[User]):
    entity_name = "user"
    index_name = "users"
    state_type = User


class ClientEntity(IndexedEntity[Client]):
    entity_name = "client"
    index_name = "clients"
    state_type = Client


class ProjectEntity(IndexedEntity[Project]):
    entity_name = "project"
    index_name = "projects"
    state_type = Project


class MilestoneEntity(IndexedEntity[Milestone]):
    entity_name = "milestone"
    index_name = "milestones"
    state_type = Milestone


class InvoiceEntity(IndexedEntity[Invoice]):
    entity_name = "invoice"
    index_name = "invoices"
    state_type = Invoice


class MessageEntity(IndexedEntity[Message]):
    entity_name = "message"
    index_name = "messages"
    state_type = Message
