from uuid import UUID

from fastapi import APIRouter, Depends, status

from bachelor_point.api.dependencies import (
    get_authenticate_account_use_case,
    get_current_principal,
    get_delete_account_use_case,
    get_list_accounts_use_case,
    get_moderate_account_use_case,
    get_own_profile_use_case,
    get_register_account_use_case,
    get_reveal_contact_use_case,
    get_update_profile_use_case,
)
from bachelor_point.api.schemas.account_schemas import (
    AccountResponse,
    AdminAccountResponse,
    ContactResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ModerationResponse,
    RegisterRequest,
    RegisterResponse,
    UpdateProfileRequest,
)
from bachelor_point.application.use_cases.authenticate_account import (
    AuthenticateAccount,
    AuthenticateAccountInput,
)
from bachelor_point.application.use_cases.delete_account import DeleteAccount
from bachelor_point.application.use_cases.get_own_profile import GetOwnProfile
from bachelor_point.application.use_cases.list_accounts import ListAccounts
from bachelor_point.application.use_cases.moderate_account import (
    ModerateAccount,
    ModerateAccountInput,
    ModerationAction,
)
from bachelor_point.application.use_cases.register_account import (
    RegisterAccount,
    RegisterAccountInput,
)
from bachelor_point.application.use_cases.reveal_contact import RevealContact
from bachelor_point.application.use_cases.update_profile import (
    UpdateProfile,
    UpdateProfileInput,
)
from bachelor_point.domain.value_objects.principal import Principal

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse)
async def register(
    body: RegisterRequest,
    use_case: RegisterAccount = Depends(get_register_account_use_case),
) -> RegisterResponse:
    account = await use_case.execute(
        RegisterAccountInput(
            student_id=body.student_id,
            name=body.name,
            email=body.email,
            password=body.password,
            gender=body.gender,
            identity_document=body.identity_document,
        )
    )
    return RegisterResponse(
        message="Account registered successfully. It will be usable once an admin approves it.",
        account=AccountResponse.model_validate(account),
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    use_case: AuthenticateAccount = Depends(get_authenticate_account_use_case),
) -> LoginResponse:
    result = await use_case.execute(
        AuthenticateAccountInput(identifier=body.identifier, password=body.password)
    )
    return LoginResponse(
        message="Login successful",
        token=result.token,
        account=AccountResponse.model_validate(result.account),
    )


@router.get("/self", response_model=AccountResponse)
async def get_self(
    principal: Principal = Depends(get_current_principal),
    use_case: GetOwnProfile = Depends(get_own_profile_use_case),
) -> AccountResponse:
    return AccountResponse.model_validate(await use_case.execute(principal))


@router.put("/self", response_model=AccountResponse)
async def update_self(
    body: UpdateProfileRequest,
    principal: Principal = Depends(get_current_principal),
    use_case: UpdateProfile = Depends(get_update_profile_use_case),
) -> AccountResponse:
    account = await use_case.execute(principal, UpdateProfileInput(bio=body.bio, photo=body.photo))
    return AccountResponse.model_validate(account)


@router.get("", response_model=list[AdminAccountResponse])
async def list_accounts(
    principal: Principal = Depends(get_current_principal),
    use_case: ListAccounts = Depends(get_list_accounts_use_case),
) -> list[AdminAccountResponse]:
    """All accounts for admins. Password hashes are never included."""
    accounts = await use_case.execute(principal)
    return [AdminAccountResponse.model_validate(a) for a in accounts]


async def _moderate(
    use_case: ModerateAccount,
    principal: Principal,
    student_id: str,
    action: ModerationAction,
    message: str,
) -> ModerationResponse:
    account = await use_case.execute(
        principal, ModerateAccountInput(target_id=student_id, action=action)
    )
    return ModerationResponse(message=message, account=AdminAccountResponse.model_validate(account))


@router.get("/{student_id}/approve", response_model=ModerationResponse)
async def approve_account(
    student_id: str,
    principal: Principal = Depends(get_current_principal),
    use_case: ModerateAccount = Depends(get_moderate_account_use_case),
) -> ModerationResponse:
    return await _moderate(
        use_case, principal, student_id, ModerationAction.APPROVE, "Account approved."
    )


@router.get("/{student_id}/ban", response_model=ModerationResponse)
async def ban_account(
    student_id: str,
    principal: Principal = Depends(get_current_principal),
    use_case: ModerateAccount = Depends(get_moderate_account_use_case),
) -> ModerationResponse:
    return await _moderate(use_case, principal, student_id, ModerationAction.BAN, "Account banned.")


@router.get("/{student_id}/promote", response_model=ModerationResponse)
async def promote_account(
    student_id: str,
    principal: Principal = Depends(get_current_principal),
    use_case: ModerateAccount = Depends(get_moderate_account_use_case),
) -> ModerationResponse:
    return await _moderate(
        use_case, principal, student_id, ModerationAction.PROMOTE, "Account promoted to admin."
    )


@router.delete("/{student_id}", response_model=MessageResponse)
async def delete_account(
    student_id: str,
    principal: Principal = Depends(get_current_principal),
    use_case: DeleteAccount = Depends(get_delete_account_use_case),
) -> MessageResponse:
    await use_case.execute(principal, student_id)
    return MessageResponse(message="Account deleted.")


@router.get("/{listing_id}/contact", response_model=ContactResponse)
async def reveal_contact(
    listing_id: UUID,
    principal: Principal = Depends(get_current_principal),
    use_case: RevealContact = Depends(get_reveal_contact_use_case),
) -> ContactResponse:
    """Owner contact details for a listing, if the caller's gender matches the listing."""
    contact = await use_case.execute(principal, listing_id)
    return ContactResponse.model_validate(contact)
