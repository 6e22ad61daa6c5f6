from abc import ABC, abstractmethod

from bachelor_point.domain.entities.account import Account
from bachelor_point.domain.value_objects.principal import Principal


class PasswordHasher(ABC):
    """Port for a slow, salted one-way password hash."""

    @abstractmethod
    async def hash(self, password: str) -> str:
        ...

    @abstractmethod
    async def verify(self, password: str, password_hash: str) -> bool:
        ...


class TokenService(ABC):
    """Port for issuing and verifying signed session tokens."""

    @abstractmethod
    def issue(self, account: Account) -> str:
        ...

    @abstractmethod
    def verify(self, token: str) -> Principal:
        """Raises InvalidCredentialsError for a bad, tampered or expired token."""
        ...
