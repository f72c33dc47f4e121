from pydantic import SecretStr

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_admin_user_command_repo import IAdminUserCommandRepo
from src.service.ticketing.app.interface.i_admin_user_query_repo import IAdminUserQueryRepo
from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from src.service.ticketing.domain.entity.admin_user_entity import (
    AdminRole,
    AdminUserEntity,
    normalize_email,
)


class CreateAdminUserUseCase:
    """
    Provision an admin from the command line.

    An existing email gets its password reset and is reactivated instead of
    failing on the unique constraint.
    """

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

    @Logger.io
    async def execute(
        self,
        *,
        email: str,
        password: SecretStr,
        name: str,
        role: AdminRole = AdminRole.ADMIN,
    ) -> tuple[AdminUserEntity, bool]:
        """Returns (admin, created). The email is stored in normalized form."""
        email = normalize_email(email)
        existing = await self.admin_user_query_repo.get_by_email(email=email)
        if existing is not None and existing.id is not None:
            hashed_password = self.password_hasher.hash_password(plain_password=password)
            admin = await self.admin_user_command_repo.reset_password_and_activate(
                admin_id=existing.id, hashed_password=hashed_password
            )
            Logger.base.info(f'🔁 [ADMIN] Password reset and reactivated for admin {admin.id}')
            return admin, False

        admin = AdminUserEntity(email=email, name=name, role=role, is_active=True)
        admin.set_password(password, self.password_hasher)
        admin = await self.admin_user_command_repo.create(admin=admin)
        Logger.base.info(f'👤 [ADMIN] Admin {admin.id} created')
        return admin, True
