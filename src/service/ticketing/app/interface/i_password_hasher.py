from abc import ABC, abstractmethod
from pydantic import SecretStr


class IPasswordHasher(ABC):
    """Abstract interface for password hashing operations"""

    @abstractmethod
    def hash_password(self, *, plain_password: SecretStr) -> str:
        """Hash a plain text password (salted, one-way)"""
        pass

    @abstractmethod
    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        """Constant-time check of a plain text password against a stored hash"""
        pass
