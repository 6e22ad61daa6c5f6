from enum import Enum


class AccountStatus(str, Enum):
    """Moderation status of an account."""

    PENDING = "pending"
    APPROVED = "approved"
    BANNED = "banned"

    @property
    def can_use_listings(self) -> bool:
        """Only approved accounts may post or browse listings."""
        return self is AccountStatus.APPROVED
