from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.ticketing.domain.entity.event_entity import EventEntity


class IEventQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def list_active(
        self,
        *,
        limit: int,
        offset: int,
        search: Optional[str] = None,
        upcoming: bool = False,
    ) -> List[EventEntity]:
        """
        Active events ordered by date. ``search`` is matched literally against
        title, description and venue; ``upcoming`` drops events dated before today.
        """
        pass
