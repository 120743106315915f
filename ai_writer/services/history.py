"""History of generated writing, newest first."""

from typing import List, Optional

from pydantic import ValidationError

from ai_writer.infrastructure.database import Database
from ai_writer.infrastructure.error_handling import handle_service_errors
from ai_writer.infrastructure.logging import get_logger
from ai_writer.models.history import HistoryItem, HistoryList
from ai_writer.models.writing import Tone, WritingType

logger = get_logger(__name__)

DEFAULT_HISTORY_KEY = "ai-writer-history"


class HistoryService:
    """Append-only history persisted as one serialized list under a fixed key."""

    def __init__(self, db: Database, key: str = DEFAULT_HISTORY_KEY):
        self.db = db
        self.key = key

    @handle_service_errors("History Service")
    async def list_items(self) -> List[HistoryItem]:
        return await self._load()

    async def _load(self) -> List[HistoryItem]:
        raw = await self.db.get_value(self.key)
        if not raw:
            return []
        try:
            return HistoryList.validate_json(raw)
        except ValidationError as e:
            logger.warning("Stored history is unreadable, ignoring it", key=self.key, error=str(e))
            return []

    async def _save(self, items: List[HistoryItem]) -> None:
        await self.db.set_value(self.key, HistoryList.dump_json(items).decode("utf-8"))

    @handle_service_errors("History Service")
    async def add(self, content: str, writing_type: WritingType, tone: Tone) -> HistoryItem:
        item = HistoryItem(content=content, type=writing_type, tone=tone)
        items = await self._load()
        await self._save([item] + items)
        logger.info("Saved to history", item_id=item.id, writing_type=item.type.value)
        return item

    async def get(self, item_id: str) -> Optional[HistoryItem]:
        for item in await self.list_items():
            if item.id == item_id:
                return item
        return None

    @handle_service_errors("History Service")
    async def delete(self, item_id: str) -> bool:
        """Remove one item; returns False when no item has that id."""
        items = await self._load()
        remaining = [item for item in items if item.id != item_id]
        if len(remaining) == len(items):
            return False
        await self._save(remaining)
        logger.info("Deleted history item", item_id=item_id)
        return True

    @handle_service_errors("History Service")
    async def clear(self) -> None:
        await self.db.delete_value(self.key)
        logger.info("Cleared history", key=self.key)
