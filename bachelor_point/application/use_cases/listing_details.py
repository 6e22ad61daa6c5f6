from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from bachelor_point.application.validation import require_fields
from bachelor_point.domain.exceptions import ValidationError

# listings.rent is NUMERIC(10, 2)
MAX_RENT = Decimal("99999999.99")


@dataclass
class ListingDetails:
    """Caller-supplied listing content shared by create and update."""

    title: str | None
    description: str | None
    available_from: date | None
    gender: str | None
    rent: Decimal | None
    location: str | None
    images: list[str] | None

    def validate(self) -> None:
        require_fields(
            title=self.title,
            description=self.description,
            available_from=self.available_from,
            gender=self.gender,
            rent=self.rent,
            location=self.location,
            images=self.images,
        )
        if self.rent <= 0:
            raise ValidationError("Rent must be a positive amount.")
        if self.rent > MAX_RENT:
            raise ValidationError(f"Rent cannot exceed {MAX_RENT}.")
        if self.rent.as_tuple().exponent < -2:
            raise ValidationError("Rent can have at most two decimal places.")
        if not self.images:
            raise ValidationError("At least one image is required.")
        if any(not isinstance(image, str) or not image.strip() for image in self.images):
            raise ValidationError("Images must be non-empty strings.")
