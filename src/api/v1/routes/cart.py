"""Shopping cart API routes, nested under a profile."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request, status

from api.v1.dependencies import get_cart_service
from api.v1.schemas.cart import CartItemCreate, CartItemResponse
from api.v1.schemas.common import MessageResponse
from core.rate_limit import limiter
from domain.services.cart_service import CartService

router = APIRouter(prefix="/profile/{profile_id}/cart", tags=["cart"])


@router.get(
    "",
    response_model=list[CartItemResponse],
    summary="Get a profile's shopping cart",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_cart(
    request: Request,
    profile_id: str,
    service: CartService = Depends(get_cart_service),
) -> list[CartItemResponse]:
    """List the items in the cart. Unknown profiles have an empty cart."""
    items = await service.get_cart(profile_id)
    return [CartItemResponse.model_validate(item) for item in items]


@router.post(
    "",
    response_model=CartItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an item to a profile's shopping cart",
    responses={
        201: {"description": "Item added"},
        400: {"description": "item_id, qty or order_type missing or falsy"},
        500: {"model": MessageResponse, "description": "Storage failure"},
    },
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": CartItemCreate.model_json_schema()}}
        }
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def add_to_cart(
    request: Request,
    profile_id: str,
    body: Annotated[Any, Body()] = None,
    service: CartService = Depends(get_cart_service),
) -> CartItemResponse:
    """Add an item; ``profile_id`` always comes from the path."""
    fields = CartItemCreate.from_body(body)
    item = await service.add_item(
        profile_id=profile_id,
        item_id=fields.item_id,
        qty=fields.qty,
        order_type=fields.order_type,
    )
    return CartItemResponse.model_validate(item)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove an item from a profile's shopping cart",
    responses={
        204: {"description": "Item removed"},
        404: {"model": MessageResponse, "description": "Item not in cart"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def remove_from_cart(
    request: Request,
    profile_id: str,
    item_id: str,
    service: CartService = Depends(get_cart_service),
) -> None:
    """Remove every cart row for this item."""
    await service.remove_item(profile_id, item_id)
    return None
