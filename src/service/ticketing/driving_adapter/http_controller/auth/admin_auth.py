"""
Admin gate for protected routes.

Every request re-reads the admin row, so a deleted or deactivated admin is
locked out immediately even while their token is still unexpired.
"""

from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_admin_user_query_repo import IAdminUserQueryRepo
from src.service.ticketing.domain.entity.admin_user_entity import AdminUserEntity
from src.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    admin_user_query_repo: IAdminUserQueryRepo = Depends(
        Provide[Container.admin_user_query_repo]
    ),
) -> AdminUserEntity:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError('No token provided')

    payload = jwt_auth.decode_access_token(credentials.credentials)

    admin = await admin_user_query_repo.get_by_id(admin_id=payload['admin_id'])
    if admin is None:
        Logger.base.warning(f'🔐 [AUTH] Token for missing admin {payload["admin_id"]}')
        raise AuthenticationError('Invalid token')
    if not admin.is_active:
        Logger.base.warning(f'🔐 [AUTH] Token for deactivated admin {admin.id}')
        raise AuthenticationError('Invalid token')

    return admin
