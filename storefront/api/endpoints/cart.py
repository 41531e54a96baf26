"""Cart page, checkout and discount validation."""

from fastapi import APIRouter, BackgroundTasks
from fastapi.responses import HTMLResponse, JSONResponse

from storefront.api.dependencies import ServicesDep, TenantDep
from storefront.application.services.checkout_service import calculate_discount
from storefront.pages import render_cart_page
from storefront.schemas.cart import (
    CheckoutRequestSchema,
    CheckoutResponse,
    ValidateDiscountRequest,
    ValidateDiscountResponse,
)

router = APIRouter()


@router.get("", response_class=HTMLResponse)
async def cart_page(tenant: TenantDep) -> HTMLResponse:
    return HTMLResponse(content=render_cart_page(tenant.name))


@router.post("/checkout", response_model=CheckoutResponse)
async def checkout(
    body: CheckoutRequestSchema,
    tenant: TenantDep,
    services: ServicesDep,
    background_tasks: BackgroundTasks,
) -> CheckoutResponse:
    """Create a checkout session; discount codes are validated first.

    400 for an empty cart or an inapplicable discount code, 502 when
    checkout-service or discounts-service fails.
    """
    result = await services.checkout.checkout(tenant, body.to_dto())
    background_tasks.add_task(services.checkout.track_checkout, tenant, result)
    return CheckoutResponse(
        checkout_url=result.checkout_url,
        order_id=result.order_id,
        subtotal=result.subtotal,
        discount=result.discount,
        total=result.total,
    )


@router.post(
    "/validate-discount",
    response_model=ValidateDiscountResponse,
    responses={400: {"model": ValidateDiscountResponse}},
)
async def validate_discount(
    body: ValidateDiscountRequest, tenant: TenantDep, services: ServicesDep
) -> ValidateDiscountResponse | JSONResponse:
    """Check a code against the cart subtotal; invalid codes return 400 with valid=false."""
    validation = await services.checkout.validate_discount(tenant, body.code, body.subtotal)
    if not validation.valid:
        return JSONResponse(
            status_code=400,
            content=ValidateDiscountResponse(valid=False, error=validation.error).model_dump(
                exclude_none=True
            ),
        )
    amount = calculate_discount(validation.discount, body.subtotal)
    return ValidateDiscountResponse(
        valid=True,
        discount=validation.discount,
        discount_amount=amount,
        total=body.subtotal - amount,
    )
