"""Application service for the singleton website content document."""

import logging

from clientportal.application.interfaces import RecordStore
from clientportal.application.persistence import WebsiteContentEntity
from clientportal.application.schemas import WebsiteContentSchema
from clientportal.domain.records import WEBSITE_CONTENT_ID, WebsiteContent

logger = logging.getLogger(__name__)


class ContentService:
    def __init__(self, store: RecordStore):
        self._store = store

    async def get_content(self) -> WebsiteContent:
        """Current content; seeded with the defaults on first request."""
        entity = await WebsiteContentEntity.ensure_exists(self._store, WEBSITE_CONTENT_ID)
        return await entity.get_state()

    async def replace_content(self, data: WebsiteContentSchema) -> WebsiteContent:
        entity = await WebsiteContentEntity.ensure_exists(self._store, WEBSITE_CONTENT_ID)
        content = WebsiteContent.from_dict({**data.model_dump(), "id": WEBSITE_CONTENT_ID})
        await entity.save(content)
        logger.info("Website content updated")
        return content
