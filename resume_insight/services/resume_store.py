"""Resume storage: abstract store plus an in-memory implementation."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List, Optional

from resume_insight.schemas.resume import ResumeRecord
from resume_insight.utils.logger import get_logger

logger = get_logger(__name__)


class ResumeStore(ABC):
    """Durable home for resume records. Records are replaced whole on every save."""

    @abstractmethod
    async def save(self, record: ResumeRecord) -> ResumeRecord:
        """Insert or replace; returns the stored copy (with updated_at bumped)."""
        ...

    @abstractmethod
    async def get(self, resume_id: str) -> Optional[ResumeRecord]:
        ...

    @abstractmethod
    async def list_for_user(self, user_id: str) -> List[ResumeRecord]:
        """All records of a user, newest first."""
        ...

    @abstractmethod
    async def delete(self, resume_id: str) -> bool:
        """True when a record was removed."""
        ...


class InMemoryResumeStore(ResumeStore):
    """Dict-backed store. Hands out copies so callers never mutate stored state."""

    def __init__(self) -> None:
        self._records: Dict[str, ResumeRecord] = {}

    async def save(self, record: ResumeRecord) -> ResumeRecord:
        stored = record.model_copy(update={"updated_at": datetime.now(timezone.utc)})
        self._records[stored.id] = stored
        logger.debug("Saved resume %s status=%s", stored.id, stored.status.value)
        return stored.model_copy()

    async def get(self, resume_id: str) -> Optional[ResumeRecord]:
        record = self._records.get(resume_id)
        return record.model_copy() if record else None

    async def list_for_user(self, user_id: str) -> List[ResumeRecord]:
        records = [r for r in self._records.values() if r.user_id == user_id]
        records.sort(key=lambda r: r.created_at, reverse=True)
        return [r.model_copy() for r in records]

    async def delete(self, resume_id: str) -> bool:
        return self._records.pop(resume_id, None) is not None
