"""History models for generated writing."""

import time
import uuid
from typing import List

from pydantic import BaseModel, Field, TypeAdapter

from ai_writer.models.writing import Tone, WritingType


def _now_ms() -> int:
    return int(time.time() * 1000)


class HistoryItem(BaseModel):
    """A generated piece of writing kept in the local history."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    content: str
    type: WritingType
    tone: Tone
    timestamp: int = Field(default_factory=_now_ms, description="Epoch milliseconds")

    @property
    def preview(self) -> str:
        """First line of the content, shortened for listings."""
        first_line = self.content.strip().split("\n", 1)[0]
        if len(first_line) > 60:
            return first_line[:57] + "..."
        return first_line


HistoryList = TypeAdapter(List[HistoryItem])
