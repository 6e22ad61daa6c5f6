from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from bachelor_point.domain.value_objects.gender import normalize_gender


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Listing:
    """A room offered for rent, with its images kept in display order."""

    title: str
    description: str
    available_from: date
    gender: str
    rent: Decimal
    location: str
    owner_id: str
    images: list[str] = field(default_factory=list)

    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(
        cls,
        *,
        owner_id: str,
        title: str,
        description: str,
        available_from: date,
        gender: str,
        rent: Decimal,
        location: str,
        images: list[str],
    ) -> "Listing":
        return cls(
            owner_id=owner_id,
            title=title.strip(),
            description=description.strip(),
            available_from=available_from,
            gender=normalize_gender(gender),
            rent=rent,
            location=location.strip(),
            images=list(images),
        )

    def is_owned_by(self, student_id: str) -> bool:
        return self.owner_id == student_id
