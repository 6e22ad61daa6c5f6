"""
Dependency wiring for the route handlers.

Repositories share the request-scoped session; use cases are built per
request from those repositories plus the process-wide blob store,
password hasher and token service.
"""
from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bachelor_point.application.interfaces.account_repository import AccountRepository
from bachelor_point.application.interfaces.blob_store import BlobStore
from bachelor_point.application.interfaces.listing_repository import ListingRepository
from bachelor_point.application.interfaces.security import PasswordHasher, TokenService
from bachelor_point.application.use_cases.authenticate_account import AuthenticateAccount
from bachelor_point.application.use_cases.browse_listings import (
    GetListing,
    ListListings,
    ListOwnListings,
)
from bachelor_point.application.use_cases.create_listing import CreateListing
from bachelor_point.application.use_cases.delete_account import DeleteAccount
from bachelor_point.application.use_cases.delete_listing import DeleteListing
from bachelor_point.application.use_cases.get_own_profile import GetOwnProfile
from bachelor_point.application.use_cases.list_accounts import ListAccounts
from bachelor_point.application.use_cases.moderate_account import ModerateAccount
from bachelor_point.application.use_cases.register_account import RegisterAccount
from bachelor_point.application.use_cases.reveal_contact import RevealContact
from bachelor_point.application.use_cases.update_listing import UpdateListing
from bachelor_point.application.use_cases.update_profile import UpdateProfile
from bachelor_point.config import settings
from bachelor_point.domain.exceptions import InvalidCredentialsError
from bachelor_point.domain.value_objects.principal import Principal
from bachelor_point.infrastructure.database.connection import get_db_session
from bachelor_point.infrastructure.database.repositories.account_repository import (
    SqlAlchemyAccountRepository,
)
from bachelor_point.infrastructure.database.repositories.listing_repository import (
    SqlAlchemyListingRepository,
)
from bachelor_point.infrastructure.security.jwt_tokens import JwtTokenService
from bachelor_point.infrastructure.security.password_hasher import BcryptPasswordHasher
from bachelor_point.infrastructure.storage.local_blob_store import LocalBlobStore

_bearer = HTTPBearer(auto_error=False)


# ---- Low-level dependencies ------------------------------------------------

def get_account_repo(session: AsyncSession = Depends(get_db_session)) -> AccountRepository:
    return SqlAlchemyAccountRepository(session)


def get_listing_repo(session: AsyncSession = Depends(get_db_session)) -> ListingRepository:
    return SqlAlchemyListingRepository(session)


@lru_cache
def get_blob_store() -> LocalBlobStore:
    return LocalBlobStore(settings.storage_root)


def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher()


def get_token_service() -> TokenService:
    return JwtTokenService()


# ---- Authentication --------------------------------------------------------

def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    token_service: TokenService = Depends(get_token_service),
    account_repo: AccountRepository = Depends(get_account_repo),
) -> Principal:
    """
    Verify the bearer token, then reload the account it names so role and
    status reflect the row, not the claims frozen into the token.
    """
    if credentials is None:
        raise _unauthorized("Access token is required.")
    try:
        claims = token_service.verify(credentials.credentials)
    except InvalidCredentialsError as exc:
        raise _unauthorized(exc.message) from exc

    account = await account_repo.get_by_student_id(claims.student_id)
    if account is None:
        raise _unauthorized("Account no longer exists.")
    return Principal.from_account(account)


# ---- Account use cases -----------------------------------------------------

def get_register_account_use_case(
    account_repo: AccountRepository = Depends(get_account_repo),
    blob_store: BlobStore = Depends(get_blob_store),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> RegisterAccount:
    return RegisterAccount(account_repo, blob_store, password_hasher)


def get_authenticate_account_use_case(
    account_repo: AccountRepository = Depends(get_account_repo),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
) -> AuthenticateAccount:
    return AuthenticateAccount(account_repo, password_hasher, token_service)


def get_own_profile_use_case(
    account_repo: AccountRepository = Depends(get_account_repo),
) -> GetOwnProfile:
    return GetOwnProfile(account_repo)


def get_update_profile_use_case(
    account_repo: AccountRepository = Depends(get_account_repo),
    blob_store: BlobStore = Depends(get_blob_store),
) -> UpdateProfile:
    return UpdateProfile(account_repo, blob_store)


def get_moderate_account_use_case(
    account_repo: AccountRepository = Depends(get_account_repo),
) -> ModerateAccount:
    return ModerateAccount(account_repo)


def get_list_accounts_use_case(
    account_repo: AccountRepository = Depends(get_account_repo),
) -> ListAccounts:
    return ListAccounts(account_repo)


def get_delete_account_use_case(
    account_repo: AccountRepository = Depends(get_account_repo),
) -> DeleteAccount:
    return DeleteAccount(account_repo)


def get_reveal_contact_use_case(
    account_repo: AccountRepository = Depends(get_account_repo),
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> RevealContact:
    return RevealContact(account_repo, listing_repo)


# ---- Listing use cases -----------------------------------------------------

def get_create_listing_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
    blob_store: BlobStore = Depends(get_blob_store),
) -> CreateListing:
    return CreateListing(listing_repo, blob_store)


def get_list_listings_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> ListListings:
    return ListListings(listing_repo)


def get_listing_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> GetListing:
    return GetListing(listing_repo)


def get_list_own_listings_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> ListOwnListings:
    return ListOwnListings(listing_repo)


def get_update_listing_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
    blob_store: BlobStore = Depends(get_blob_store),
) -> UpdateListing:
    return UpdateListing(listing_repo, blob_store)


def get_delete_listing_use_case(
    listing_repo: ListingRepository = Depends(get_listing_repo),
) -> DeleteListing:
    return DeleteListing(listing_repo)
