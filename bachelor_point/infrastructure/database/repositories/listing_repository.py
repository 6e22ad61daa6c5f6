from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import DataError
from sqlalchemy.ext.asyncio import AsyncSession

from bachelor_point.application.interfaces.listing_repository import ListingRepository
from bachelor_point.domain.entities.listing import Listing
from bachelor_point.domain.exceptions import ValidationError
from bachelor_point.infrastructure.database.models import ListingModel

_OUT_OF_RANGE = "Listing fields exceed the allowed size."


def _to_domain(model: ListingModel) -> Listing:
    return Listing(
        id=model.id,
        owner_id=model.owner_id,
        title=model.title,
        description=model.description,
        available_from=model.available_from,
        gender=model.gender,
        rent=model.rent,
        location=model.location,
        images=list(model.images or []),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _to_model(listing: Listing) -> ListingModel:
    return ListingModel(
        id=listing.id,
        owner_id=listing.owner_id,
        title=listing.title,
        description=listing.description,
        available_from=listing.available_from,
        gender=listing.gender,
        rent=listing.rent,
        location=listing.location,
        images=list(listing.images),
        created_at=listing.created_at,
        updated_at=listing.updated_at,
    )


class SqlAlchemyListingRepository(ListingRepository):
    """SQLAlchemy implementation for listing persistence."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, listing: Listing) -> None:
        self._session.add(_to_model(listing))
        try:
            await self._session.flush()
        except DataError as exc:
            raise ValidationError(_OUT_OF_RANGE) from exc

    async def get_by_id(self, listing_id: UUID) -> Listing | None:
        model = await self._session.get(ListingModel, listing_id)
        return _to_domain(model) if model is not None else None

    async def list_all(self) -> list[Listing]:
        result = await self._session.execute(
            select(ListingModel).order_by(ListingModel.created_at.desc())
        )
        return [_to_domain(m) for m in result.scalars().all()]

    async def list_by_owner(self, owner_id: str) -> list[Listing]:
        result = await self._session.execute(
            select(ListingModel)
            .where(ListingModel.owner_id == owner_id)
            .order_by(ListingModel.created_at.desc())
        )
        return [_to_domain(m) for m in result.scalars().all()]

    async def update_owned(self, listing: Listing) -> bool:
        statement = (
            update(ListingModel)
            .where(ListingModel.id == listing.id, ListingModel.owner_id == listing.owner_id)
            .values(
                title=listing.title,
                description=listing.description,
                available_from=listing.available_from,
                gender=listing.gender,
                rent=listing.rent,
                location=listing.location,
                images=list(listing.images),
                updated_at=listing.updated_at,
            )
            .execution_options(synchronize_session="fetch")
        )
        try:
            result = await self._session.execute(statement)
        except DataError as exc:
            raise ValidationError(_OUT_OF_RANGE) from exc
        return result.rowcount > 0

    async def delete(self, listing_id: UUID) -> bool:
        result = await self._session.execute(
            delete(ListingModel).where(ListingModel.id == listing_id)
        )
        return result.rowcount > 0
