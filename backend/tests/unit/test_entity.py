"""Unit tests for the Entity record handle."""

import asyncio
from dataclasses import dataclass, field

import pytest

from clientportal.application.persistence import (
    ClientEntity,
    Entity,
    ProjectEntity,
    WebsiteContentEntity,
)
from clientportal.domain.exceptions import DomainValidationError, StorageError
from clientportal.domain.records import (
    DEFAULT_WEBSITE_CONTENT,
    WEBSITE_CONTENT_ID,
    ClientStatus,
    Project,
    Record,
)
from clientportal.infrastructure.storage.memory_record_store import InMemoryRecordStore


# ── Fakes ────────────────────────────────────────────────────────────


@dataclass
class Note(Record):
    title: str = ""
    body: str = "empty"
    tags: list[str] = field(default_factory=list)


class NoteEntity(Entity[Note]):
    entity_name = "note"
    state_type = Note


class RacingRecordStore(InMemoryRecordStore):
    """Yields to the event loop after every read so concurrent writers race."""

    async def get(self, entity_type: str, record_id: str) -> bytes | None:
        payload = await super().get(entity_type, record_id)
        await asyncio.sleep(0)
        return payload


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


# ── Existence / save / delete ────────────────────────────────────────


@pytest.mark.asyncio
async def test_exists_follows_save_and_delete(store: InMemoryRecordStore):
    note = NoteEntity(store, "n1")
    assert await note.exists() is False

    await note.save(Note(id="n1", title="Hello"))
    assert await note.exists() is True

    assert await note.delete() is True
    assert await note.exists() is False


@pytest.mark.asyncio
async def test_delete_absent_record_returns_false(store: InMemoryRecordStore):
    assert await NoteEntity(store, "missing").delete() is False


@pytest.mark.asyncio
async def test_get_state_of_absent_record_is_initial_state_and_not_persisted(store: InMemoryRecordStore):
    state = await NoteEntity(store, "n1").get_state()

    assert state == Note()
    assert len(store) == 0


@pytest.mark.asyncio
async def test_save_overwrites_existing_record(store: InMemoryRecordStore):
    note = NoteEntity(store, "n1")
    await note.save(Note(id="n1", title="First", tags=["a"]))
    await note.save(Note(id="n1", title="Second"))

    state = await note.get_state()
    assert state.title == "Second"
    assert state.tags == []


# ── Patch ────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_patch_absent_record_merges_over_initial_state(store: InMemoryRecordStore):
    note = NoteEntity(store, "n1")
    patched = await note.patch({"title": "Draft"})

    assert patched == Note(id="", title="Draft", body="empty", tags=[])
    assert await note.exists() is True


@pytest.mark.asyncio
async def test_patch_present_record_leaves_other_fields(store: InMemoryRecordStore):
    note = NoteEntity(store, "n1")
    await note.save(Note(id="n1", title="Keep", body="old", tags=["x"]))

    await note.patch({"body": "new"})

    state = await note.get_state()
    assert state.title == "Keep"
    assert state.body == "new"
    assert state.tags == ["x"]


@pytest.mark.asyncio
async def test_patch_ignores_unknown_keys_and_id(store: InMemoryRecordStore):
    note = NoteEntity(store, "n1")
    await note.save(Note(id="n1", title="T"))

    state = await note.patch({"id": "other", "colour": "red", "body": "b"})

    assert state.id == "n1"
    assert not hasattr(state, "colour")
    assert state.body == "b"


@pytest.mark.asyncio
async def test_patch_with_invalid_enum_value_is_rejected(store: InMemoryRecordStore):
    client = ClientEntity(store, "c1")
    with pytest.raises(DomainValidationError):
        await client.patch({"status": "archived"})
    assert await client.exists() is False


@pytest.mark.asyncio
async def test_patch_coerces_enum_strings(store: InMemoryRecordStore):
    state = await ClientEntity(store, "c1").patch({"status": "active"})
    assert state.status is ClientStatus.ACTIVE


@pytest.mark.asyncio
async def test_concurrent_patches_are_last_write_wins():
    """Two racing patches: the final state is one writer's merge, never both."""
    store = RacingRecordStore()
    await ProjectEntity.create(store, Project(id="p1", title="Site"))

    await asyncio.gather(
        ProjectEntity(store, "p1").patch({"progress": 10}),
        ProjectEntity(store, "p1").patch({"notes": "x"}),
    )

    final = await ProjectEntity(store, "p1").get_state()
    assert (final.progress, final.notes) in [(10, ""), (0, "x")]
    assert final.title == "Site"


# ── Codec failures ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_undecodable_payload_raises_storage_error(store: InMemoryRecordStore):
    await store.put("note", "n1", b"{not json")
    with pytest.raises(StorageError):
        await NoteEntity(store, "n1").get_state()


@pytest.mark.asyncio
async def test_non_object_payload_raises_storage_error(store: InMemoryRecordStore):
    await store.put("note", "n1", b"[1, 2, 3]")
    with pytest.raises(StorageError) as excinfo:
        await NoteEntity(store, "n1").get_state()
    assert excinfo.value.entity_id == "n1"


# ── ensure_exists ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_ensure_exists_seeds_defaults_once(store: InMemoryRecordStore):
    entity = await WebsiteContentEntity.ensure_exists(store, WEBSITE_CONTENT_ID)

    content = await entity.get_state()
    assert content.id == WEBSITE_CONTENT_ID
    assert content.hero["headline"] == DEFAULT_WEBSITE_CONTENT["hero"]["headline"]


@pytest.mark.asyncio
async def test_ensure_exists_does_not_overwrite_customized_content(store: InMemoryRecordStore):
    entity = await WebsiteContentEntity.ensure_exists(store, WEBSITE_CONTENT_ID)
    content = await entity.get_state()
    content.hero["headline"] = "Custom headline"
    await entity.save(content)

    again = await WebsiteContentEntity.ensure_exists(store, WEBSITE_CONTENT_ID)

    assert (await again.get_state()).hero["headline"] == "Custom headline"


@pytest.mark.asyncio
async def test_ensure_exists_with_explicit_default_sets_id(store: InMemoryRecordStore):
    entity = await NoteEntity.ensure_exists(store, "n9", Note(title="Seed"))

    state = await entity.get_state()
    assert state.id == "n9"
    assert state.title == "Seed"
