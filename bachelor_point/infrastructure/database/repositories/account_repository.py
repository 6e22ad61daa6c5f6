from sqlalchemy import delete, select
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bachelor_point.application.interfaces.account_repository import AccountRepository
from bachelor_point.domain.entities.account import Account
from bachelor_point.domain.enums.account_role import AccountRole
from bachelor_point.domain.enums.account_status import AccountStatus
from bachelor_point.domain.exceptions import ConflictError, NotFoundError, ValidationError
from bachelor_point.infrastructure.database.models import AccountModel


def _to_domain(model: AccountModel) -> Account:
    return Account(
        student_id=model.student_id,
        name=model.name,
        email=model.email,
        password_hash=model.password_hash,
        gender=model.gender,
        id_card=model.id_card,
        bio=model.bio,
        photo=model.photo,
        role=AccountRole(model.role),
        status=AccountStatus(model.status),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _to_model(account: Account) -> AccountModel:
    return AccountModel(
        student_id=account.student_id,
        name=account.name,
        email=account.email,
        password_hash=account.password_hash,
        gender=account.gender,
        id_card=account.id_card,
        bio=account.bio,
        photo=account.photo,
        role=account.role,
        status=account.status,
        created_at=account.created_at,
        updated_at=account.updated_at,
    )


class SqlAlchemyAccountRepository(AccountRepository):
    """SQLAlchemy-backed implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, account: Account) -> None:
        self._session.add(_to_model(account))
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise ConflictError("An account with this student id or email already exists.") from exc
        except DataError as exc:
            raise ValidationError("Account fields exceed the allowed size.") from exc

    async def save(self, account: Account) -> None:
        model = await self._session.get(AccountModel, account.student_id)
        if model is None:
            # Deleted since it was loaded; never resurrect it
            raise NotFoundError(f"Account {account.student_id} not found.")
        model.bio = account.bio
        model.photo = account.photo
        model.role = account.role
        model.status = account.status
        model.updated_at = account.updated_at
        await self._session.flush()

    async def get_by_student_id(self, student_id: str) -> Account | None:
        model = await self._session.get(AccountModel, student_id)
        return _to_domain(model) if model is not None else None

    async def get_by_email(self, email: str) -> Account | None:
        result = await self._session.execute(
            select(AccountModel).where(AccountModel.email == email)
        )
        model = result.scalar_one_or_none()
        return _to_domain(model) if model is not None else None

    async def list_all(self) -> list[Account]:
        result = await self._session.execute(
            select(AccountModel).order_by(AccountModel.created_at.asc())
        )
        return [_to_domain(m) for m in result.scalars().all()]

    async def delete(self, student_id: str) -> bool:
        result = await self._session.execute(
            delete(AccountModel).where(AccountModel.student_id == student_id)
        )
        return result.rowcount > 0
