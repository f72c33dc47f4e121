from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_admin_user_query_repo import IAdminUserQueryRepo
from src.service.ticketing.domain.entity.admin_user_entity import AdminRole, AdminUserEntity
from src.service.ticketing.driven_adapter.model.admin_user_model import AdminUserModel


class AdminUserQueryRepoImpl(IAdminUserQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_active_by_email(self, *, email: str) -> Optional[AdminUserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(AdminUserModel).where(
                    func.lower(AdminUserModel.email) == email.lower(),
                    AdminUserModel.is_active.is_(True),
                )
            )
            admin_model = result.scalar_one_or_none()
            if not admin_model:
                return None
            return self._model_to_entity(admin_model)

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[AdminUserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(AdminUserModel).where(func.lower(AdminUserModel.email) == email.lower())
            )
            admin_model = result.scalar_one_or_none()
            if not admin_model:
                return None
            return self._model_to_entity(admin_model)

    @Logger.io
    async def get_by_id(self, *, admin_id: int) -> Optional[AdminUserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(AdminUserModel).where(AdminUserModel.id == admin_id)
            )
            admin_model = result.scalar_one_or_none()
            if not admin_model:
                return None
            return self._model_to_entity(admin_model)

    @staticmethod
    def _model_to_entity(admin_model: AdminUserModel) -> AdminUserEntity:
        return AdminUserEntity(
            id=admin_model.id,
            email=admin_model.email,
            name=admin_model.name,
            hashed_password=admin_model.hashed_password,
            role=AdminRole(admin_model.role),
            is_active=admin_model.is_active,
            last_login=admin_model.last_login,
            created_at=admin_model.created_at,
        )
