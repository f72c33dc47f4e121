from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticketing.domain.entity.admin_user_entity import AdminUserEntity


class IAdminUserQueryRepo(ABC):
    """Credential store reads"""

    @abstractmethod
    async def get_active_by_email(self, *, email: str) -> Optional[AdminUserEntity]:
        """Active admin with its password hash loaded, or None"""
        pass

    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[AdminUserEntity]:
        pass

    @abstractmethod
    async def get_by_id(self, *, admin_id: int) -> Optional[AdminUserEntity]:
        pass
