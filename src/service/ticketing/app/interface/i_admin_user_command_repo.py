from abc import ABC, abstractmethod
from datetime import datetime

from src.service.ticketing.domain.entity.admin_user_entity import AdminUserEntity


class IAdminUserCommandRepo(ABC):
    """Credential store writes (each call commits on its own)"""

    @abstractmethod
    async def create(self, *, admin: AdminUserEntity) -> AdminUserEntity:
        pass

    @abstractmethod
    async def reset_password_and_activate(
        self, *, admin_id: int, hashed_password: str
    ) -> AdminUserEntity:
        pass

    @abstractmethod
    async def update_last_login(self, *, admin_id: int, logged_in_at: datetime) -> None:
        pass

    @abstractmethod
    async def delete(self, *, admin_id: int) -> bool:
        pass
