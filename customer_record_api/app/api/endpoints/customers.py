"""
Customer endpoints.

Each handler runs a single linear pipeline: validate the input, call
the repository once (twice for pagination), then map the outcome to a
status code.  Domain exceptions raised along the way (``ValidationError``,
``NotFoundError``, ``StoreError``) are turned into JSON error bodies by
the handlers registered in ``main.create_app``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from customer_record_api.app.core.errors import NotFoundError
from customer_record_api.app.core.validation import (
    parse_customer_id,
    parse_page_number,
    validate_customer,
)
from customer_record_api.app.schemas.customer import (
    CustomerCreate,
    CustomerCreated,
    CustomerPage,
    CustomerRead,
    CustomerUpdate,
    ErrorResponse,
    MessageResponse,
)
from customer_record_api.app.services.customer_repository import (
    CustomerRepository,
    get_customer_repository,
)

router = APIRouter()

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}
NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def _existing_id(raw: str) -> int:
    # Ids that are not storable integers can never match a row.
    customer_id = parse_customer_id(raw)
    if customer_id is None:
        raise NotFoundError()
    return customer_id


@router.post(
    "",
    response_model=CustomerCreated,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def create_customer(
    customer_in: CustomerCreate,
    repo: CustomerRepository = Depends(get_customer_repository),
) -> CustomerCreated:
    """Validate and store a new customer, returning its id."""
    validate_customer(customer_in)
    customer_id = await repo.insert(customer_in)
    return CustomerCreated(message="Customer added successfully", id=customer_id)


@router.get("", response_model=List[CustomerRead], responses=ERROR_RESPONSES)
async def search_customers(
    search: Optional[str] = Query(None, description="Substring matched against names, email and address"),
    repo: CustomerRepository = Depends(get_customer_repository),
) -> List[CustomerRead]:
    """Search customers by name, email or address.

    The match is a case-insensitive substring match and the result is
    not paginated.  Omitting ``search`` returns every customer.
    """
    return await repo.search(search or "")


@router.get("/page/{page}", response_model=CustomerPage, responses=ERROR_RESPONSES)
async def list_customers_page(
    page: str,
    repo: CustomerRepository = Depends(get_customer_repository),
) -> CustomerPage:
    """Return a page of five customers with the total count and page count."""
    return await repo.page(parse_page_number(page))


@router.get(
    "/{customer_id}",
    response_model=CustomerRead,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
async def get_customer(
    customer_id: str,
    repo: CustomerRepository = Depends(get_customer_repository),
) -> CustomerRead:
    return await repo.get_by_id(_existing_id(customer_id))


@router.put(
    "/{customer_id}",
    response_model=MessageResponse,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
async def update_customer(
    customer_id: str,
    customer_in: CustomerUpdate,
    repo: CustomerRepository = Depends(get_customer_repository),
) -> MessageResponse:
    """Replace all fields of an existing customer."""
    validate_customer(customer_in)
    if not await repo.update(_existing_id(customer_id), customer_in):
        raise NotFoundError()
    return MessageResponse(message="Customer updated successfully")


@router.delete(
    "/{customer_id}",
    response_model=MessageResponse,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
async def delete_customer(
    customer_id: str,
    repo: CustomerRepository = Depends(get_customer_repository),
) -> MessageResponse:
    if not await repo.delete(_existing_id(customer_id)):
        raise NotFoundError()
    return MessageResponse(message="Customer deleted")
