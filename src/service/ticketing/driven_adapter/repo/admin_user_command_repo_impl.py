from datetime import datetime
from typing import AsyncContextManager, Callable

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_admin_user_command_repo import IAdminUserCommandRepo
from src.service.ticketing.domain.entity.admin_user_entity import AdminUserEntity
from src.service.ticketing.driven_adapter.model.admin_user_model import AdminUserModel
from src.service.ticketing.driven_adapter.repo.admin_user_query_repo_impl import (
    AdminUserQueryRepoImpl,
)


class AdminUserCommandRepoImpl(IAdminUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, admin: AdminUserEntity) -> AdminUserEntity:
        async with self.session_factory() as session:
            admin_model = AdminUserModel(
                email=admin.email,
                hashed_password=admin.hashed_password,
                name=admin.name,
                role=admin.role.value,
                is_active=admin.is_active,
            )

            session.add(admin_model)
            await session.commit()
            await session.refresh(admin_model)

            return AdminUserQueryRepoImpl._model_to_entity(admin_model)

    @Logger.io
    async def reset_password_and_activate(
        self, *, admin_id: int, hashed_password: str
    ) -> AdminUserEntity:
        async with self.session_factory() as session:
            await session.execute(
                update(AdminUserModel)
                .where(AdminUserModel.id == admin_id)
                .values(hashed_password=hashed_password, is_active=True)
            )
            result = await session.execute(
                select(AdminUserModel).where(AdminUserModel.id == admin_id)
            )
            admin_model = result.scalar_one_or_none()
            if not admin_model:
                raise NotFoundError('Admin user not found')
            await session.commit()
            return AdminUserQueryRepoImpl._model_to_entity(admin_model)

    @Logger.io
    async def update_last_login(self, *, admin_id: int, logged_in_at: datetime) -> None:
        async with self.session_factory() as session:
            await session.execute(
                update(AdminUserModel)
                .where(AdminUserModel.id == admin_id)
                .values(last_login=logged_in_at)
            )
            await session.commit()

    @Logger.io
    async def delete(self, *, admin_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(AdminUserModel).where(AdminUserModel.id == admin_id)
            )
            await session.commit()
            return result.rowcount > 0  # pyright: ignore[reportAttributeAccessIssue]
