"""
Admin token issuing and decoding (HS256 JWT)
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.ticketing.domain.entity.admin_user_entity import AdminUserEntity


class JwtAuth:
    def __init__(
        self,
        *,
        secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        token_expire_hours: Optional[int] = None,
    ) -> None:
        self.secret = secret or settings.SECRET_KEY.get_secret_value()
        self.algorithm = algorithm or settings.ALGORITHM
        self.token_expire_hours = token_expire_hours or settings.ACCESS_TOKEN_EXPIRE_HOURS

    def create_access_token(
        self, admin: AdminUserEntity, *, now: Optional[datetime] = None
    ) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            'sub': str(admin.id),
            'exp': issued_at + timedelta(hours=self.token_expire_hours),
            'iat': issued_at,
            'admin_id': admin.id,
            'email': admin.email,
            'role': admin.role.value,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_access_token(self, token: str) -> Dict[str, Any]:
        """
        Raises:
            AuthenticationError: bad signature, malformed or expired token
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            raise AuthenticationError('Invalid token') from e

        if not isinstance(payload.get('admin_id'), int):
            raise AuthenticationError('Invalid token')
        return payload
