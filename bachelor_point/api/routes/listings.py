from uuid import UUID

from fastapi import APIRouter, Depends, status

from bachelor_point.api.dependencies import (
    get_create_listing_use_case,
    get_current_principal,
    get_delete_listing_use_case,
    get_list_listings_use_case,
    get_list_own_listings_use_case,
    get_listing_use_case,
    get_update_listing_use_case,
)
from bachelor_point.api.schemas.account_schemas import MessageResponse
from bachelor_point.api.schemas.listing_schemas import (
    ListingMutationResponse,
    ListingRequest,
    ListingResponse,
)
from bachelor_point.application.use_cases.browse_listings import (
    GetListing,
    ListListings,
    ListOwnListings,
)
from bachelor_point.application.use_cases.create_listing import CreateListing
from bachelor_point.application.use_cases.delete_listing import DeleteListing
from bachelor_point.application.use_cases.listing_details import ListingDetails
from bachelor_point.application.use_cases.update_listing import UpdateListing
from bachelor_point.domain.value_objects.principal import Principal

router = APIRouter(prefix="/listings", tags=["listings"])


def _details(body: ListingRequest) -> ListingDetails:
    return ListingDetails(
        title=body.title,
        description=body.description,
        available_from=body.available_from,
        gender=body.gender,
        rent=body.rent,
        location=body.location,
        images=body.images,
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ListingMutationResponse)
async def create_listing(
    body: ListingRequest,
    principal: Principal = Depends(get_current_principal),
    use_case: CreateListing = Depends(get_create_listing_use_case),
) -> ListingMutationResponse:
    listing = await use_case.execute(principal, _details(body))
    return ListingMutationResponse(
        message="Listing added successfully",
        listing=ListingResponse.model_validate(listing),
    )


@router.get("", response_model=list[ListingResponse])
async def list_listings(
    principal: Principal = Depends(get_current_principal),
    use_case: ListListings = Depends(get_list_listings_use_case),
) -> list[ListingResponse]:
    return [ListingResponse.model_validate(l) for l in await use_case.execute(principal)]


@router.get("/self", response_model=list[ListingResponse])
async def list_own_listings(
    principal: Principal = Depends(get_current_principal),
    use_case: ListOwnListings = Depends(get_list_own_listings_use_case),
) -> list[ListingResponse]:
    return [ListingResponse.model_validate(l) for l in await use_case.execute(principal)]


@router.get("/{listing_id}", response_model=ListingResponse)
async def get_listing(
    listing_id: UUID,
    principal: Principal = Depends(get_current_principal),
    use_case: GetListing = Depends(get_listing_use_case),
) -> ListingResponse:
    return ListingResponse.model_validate(await use_case.execute(principal, listing_id))


@router.put("/{listing_id}", response_model=ListingMutationResponse)
async def update_listing(
    listing_id: UUID,
    body: ListingRequest,
    principal: Principal = Depends(get_current_principal),
    use_case: UpdateListing = Depends(get_update_listing_use_case),
) -> ListingMutationResponse:
    listing = await use_case.execute(principal, listing_id, _details(body))
    return ListingMutationResponse(
        message="Listing updated successfully",
        listing=ListingResponse.model_validate(listing),
    )


@router.delete("/{listing_id}", response_model=MessageResponse)
async def delete_listing(
    listing_id: UUID,
    principal: Principal = Depends(get_current_principal),
    use_case: DeleteListing = Depends(get_delete_listing_use_case),
) -> MessageResponse:
    await use_case.execute(principal, listing_id)
    return MessageResponse(message="Listing deleted successfully")
