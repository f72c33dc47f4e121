import bcrypt
from pydantic import SecretStr

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt implementation of IPasswordHasher (salt embedded in the hash)"""

    @Logger.io
    def hash_password(self, *, plain_password: SecretStr) -> str:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(password_bytes, salt)
        return hashed.decode('utf-8')

    @Logger.io
    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        """bcrypt.checkpw compares in constant time"""
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        try:
            hashed_bytes = hashed_password.encode('utf-8')
            return bcrypt.checkpw(password_bytes, hashed_bytes)
        except ValueError:
            # Stored value is not a bcrypt hash
            Logger.base.warning('🔐 [AUTH] Stored password hash is malformed')
            return False
