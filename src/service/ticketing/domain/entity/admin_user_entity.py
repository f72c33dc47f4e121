from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Optional

import attrs
from email_validator import EmailNotValidError, validate_email
from pydantic import SecretStr

from src.platform.exception.exceptions import ValidationError


if TYPE_CHECKING:
    from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher


def normalize_email(email: str) -> str:
    """
    Canonical form used both when an admin is stored and when one logs in.
    Addresses compare case-insensitively, local part included.

    Raises:
        ValidationError: not a syntactically valid address
    """
    try:
        parts = validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationError(f'Invalid email address: {e}') from e
    return parts.normalized.lower()


class AdminRole(StrEnum):
    ADMIN = 'admin'
    SUPER_ADMIN = 'super_admin'


@attrs.define
class AdminUserEntity:
    email: str = ''
    name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    role: AdminRole = AdminRole.ADMIN
    is_active: bool = True
    id: Optional[int] = None
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None

    def set_password(self, plain_password: SecretStr, password_hasher: 'IPasswordHasher') -> None:
        self.hashed_password = password_hasher.hash_password(plain_password=plain_password)

    def public_profile(self) -> dict:
        return {'id': self.id, 'email': self.email, 'name': self.name, 'role': self.role.value}
