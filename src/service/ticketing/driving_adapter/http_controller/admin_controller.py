from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.login_admin_use_case import LoginAdminUseCase
from src.service.ticketing.domain.entity.admin_user_entity import AdminUserEntity
from src.service.ticketing.driving_adapter.http_controller.auth.admin_auth import require_admin
from src.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.ticketing.driving_adapter.http_controller.schema.admin_schema import (
    AdminLoginRequest,
    AdminLoginResponse,
    AdminProfileResponse,
    AdminVerifyResponse,
)


router = APIRouter()


@router.post('/login')
@Logger.io
@inject
async def login(
    request: AdminLoginRequest,
    use_case: LoginAdminUseCase = Depends(LoginAdminUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> AdminLoginResponse:
    admin = await use_case.execute(email=request.email, password=request.password)
    token = jwt_auth.create_access_token(admin)

    return AdminLoginResponse(
        token=token,
        admin=AdminProfileResponse(**admin.public_profile()),
    )


@router.get('/verify')
@Logger.io
async def verify(current_admin: AdminUserEntity = Depends(require_admin)) -> AdminVerifyResponse:
    return AdminVerifyResponse(admin=AdminProfileResponse(**current_admin.public_profile()))
