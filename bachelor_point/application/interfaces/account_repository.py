from abc import ABC, abstractmethod

from bachelor_point.domain.entities.account import Account


class AccountRepository(ABC):
    """Port for persisting and querying Account records."""

    @abstractmethod
    async def add(self, account: Account) -> None:
        """Insert a new account. Raises ConflictError on a duplicate student id or email."""
        ...

    @abstractmethod
    async def save(self, account: Account) -> None:
        """Persist the mutable fields (bio, photo, role, status) of an existing account."""
        ...

    @abstractmethod
    async def get_by_student_id(self, student_id: str) -> Account | None:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Account | None:
        ...

    @abstractmethod
    async def list_all(self) -> list[Account]:
        ...

    @abstractmethod
    async def delete(self, student_id: str) -> bool:
        """Return True if a row was deleted."""
        ...
