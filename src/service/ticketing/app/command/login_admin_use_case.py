from datetime import datetime, timezone
from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr

from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidCredentialsError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_admin_user_command_repo import IAdminUserCommandRepo
from src.service.ticketing.app.interface.i_admin_user_query_repo import IAdminUserQueryRepo
from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from src.service.ticketing.domain.entity.admin_user_entity import (
    AdminUserEntity,
    normalize_email,
)


class LoginAdminUseCase:
    def __init__(
        self,
        *,
        admin_user_query_repo: IAdminUserQueryRepo,
        admin_user_command_repo: IAdminUserCommandRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.admin_user_query_repo = admin_user_query_repo
        self.admin_user_command_repo = admin_user_command_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        admin_user_query_repo: IAdminUserQueryRepo = Depends(
            Provide[Container.admin_user_query_repo]
        ),
        admin_user_command_repo: IAdminUserCommandRepo = Depends(
            Provide[Container.admin_user_command_repo]
        ),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            admin_user_query_repo=admin_user_query_repo,
            admin_user_command_repo=admin_user_command_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def execute(self, *, email: str, password: SecretStr) -> AdminUserEntity:
        """
        Unknown email, inactive admin and wrong password all raise the same
        InvalidCredentialsError, and so does a malformed email.
        """
        try:
            email = normalize_email(email)
        except ValidationError:
            raise InvalidCredentialsError() from None

        admin = await self.admin_user_query_repo.get_active_by_email(email=email)
        if admin is None or admin.id is None:
            raise InvalidCredentialsError()

        if not self.password_hasher.verify_password(
            plain_password=password, hashed_password=admin.hashed_password
        ):
            raise InvalidCredentialsError()

        logged_in_at = datetime.now(timezone.utc)
        await self.admin_user_command_repo.update_last_login(
            admin_id=admin.id, logged_in_at=logged_in_at
        )

        Logger.base.info(f'🔑 [LOGIN] Admin {admin.id} logged in')
        return attrs.evolve(admin, last_login=logged_in_at)
