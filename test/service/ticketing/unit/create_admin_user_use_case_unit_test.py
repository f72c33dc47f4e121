from unittest.mock import AsyncMock, Mock

import attrs
import pytest
from pydantic import SecretStr

from src.platform.exception.exceptions import ValidationError
from src.service.ticketing.app.command.create_admin_user_use_case import CreateAdminUserUseCase
from src.service.ticketing.domain.entity.admin_user_entity import AdminUserEntity


@pytest.mark.unit
class TestCreateAdminUserUseCase:
    @pytest.fixture
    def password_hasher(self) -> Mock:
        hasher = Mock()
        hasher.hash_password = Mock(return_value='$2b$12$newhash')
        return hasher

    @pytest.mark.asyncio
    async def test_new_email_creates_active_admin(self, password_hasher: Mock) -> None:
        # Arrange
        query_repo = AsyncMock()
        query_repo.get_by_email = AsyncMock(return_value=None)
        command_repo = AsyncMock()
        command_repo.create = AsyncMock(side_effect=lambda *, admin: attrs.evolve(admin, id=1))
        use_case = CreateAdminUserUseCase(
            admin_user_query_repo=query_repo,
            admin_user_command_repo=command_repo,
            password_hasher=password_hasher,
        )

        # Act
        admin, created = await use_case.execute(
            email='admin@example.com', password=SecretStr('P@ssw0rd'), name='Test Admin'
        )

        # Assert
        assert created is True
        assert admin.id == 1
        assert admin.is_active is True
        assert admin.hashed_password == '$2b$12$newhash'
        command_repo.reset_password_and_activate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_existing_email_resets_password_and_reactivates(
        self, password_hasher: Mock
    ) -> None:
        # Arrange
        existing = AdminUserEntity(id=3, email='admin@example.com', name='Old', is_active=False)
        query_repo = AsyncMock()
        query_repo.get_by_email = AsyncMock(return_value=existing)
        command_repo = AsyncMock()
        command_repo.reset_password_and_activate = AsyncMock(
            return_value=attrs.evolve(existing, is_active=True, hashed_password='$2b$12$newhash')
        )
        use_case = CreateAdminUserUseCase(
            admin_user_query_repo=query_repo,
            admin_user_command_repo=command_repo,
            password_hasher=password_hasher,
        )

        # Act
        admin, created = await use_case.execute(
            email='admin@example.com', password=SecretStr('N3wP@ss'), name='Ignored'
        )

        # Assert
        assert created is False
        assert admin.is_active is True
        command_repo.reset_password_and_activate.assert_awaited_once_with(
            admin_id=3, hashed_password='$2b$12$newhash'
        )
        command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_email_is_stored_normalized(self, password_hasher: Mock) -> None:
        # Arrange
        query_repo = AsyncMock()
        query_repo.get_by_email = AsyncMock(return_value=None)
        command_repo = AsyncMock()
        command_repo.create = AsyncMock(side_effect=lambda *, admin: attrs.evolve(admin, id=5))
        use_case = CreateAdminUserUseCase(
            admin_user_query_repo=query_repo,
            admin_user_command_repo=command_repo,
            password_hasher=password_hasher,
        )

        # Act
        admin, _ = await use_case.execute(
            email='Ops@Example.COM', password=SecretStr('P@ssw0rd'), name='Ops'
        )

        # Assert
        assert admin.email == 'ops@example.com'
        query_repo.get_by_email.assert_awaited_once_with(email='ops@example.com')

    @pytest.mark.asyncio
    async def test_invalid_email_is_rejected(self, password_hasher: Mock) -> None:
        # Arrange
        command_repo = AsyncMock()
        use_case = CreateAdminUserUseCase(
            admin_user_query_repo=AsyncMock(),
            admin_user_command_repo=command_repo,
            password_hasher=password_hasher,
        )

        # Act & Assert
        with pytest.raises(ValidationError, match='Invalid email address'):
            await use_case.execute(email='ops-at-example', password=SecretStr('x'), name='Ops')

        command_repo.create.assert_not_awaited()
