"""Coffeeshop API: superadmin creates and lists tenants."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from coffeetasks.api.v1.dependencies import get_coffeeshop_service, require_superadmin
from coffeetasks.application.dtos.coffeeshop import CoffeeshopResult, GeoPoint
from coffeetasks.application.services import CoffeeshopService
from coffeetasks.core.limiter import limit_writes
from coffeetasks.schemas.account import GeoPointSchema
from coffeetasks.schemas.coffeeshop import CoffeeshopCreateRequest, CoffeeshopResponse

router = APIRouter(dependencies=[Depends(require_superadmin)])


def _to_response(shop: CoffeeshopResult) -> CoffeeshopResponse:
    return CoffeeshopResponse(
        id=shop.id,
        name=shop.name,
        location=(
            GeoPointSchema(**shop.location.to_dict()) if shop.location else None
        ),
    )


@router.post("", response_model=CoffeeshopResponse, status_code=201)
@limit_writes
async def create_coffeeshop(
    request: Request,
    body: CoffeeshopCreateRequest,
    svc: Annotated[CoffeeshopService, Depends(get_coffeeshop_service)],
) -> CoffeeshopResponse:
    location = (
        GeoPoint(latitude=body.location.latitude, longitude=body.location.longitude)
        if body.location
        else None
    )
    shop = await svc.create_coffeeshop(body.name, location)
    return _to_response(shop)


@router.get("", response_model=list[CoffeeshopResponse])
async def list_coffeeshops(
    svc: Annotated[CoffeeshopService, Depends(get_coffeeshop_service)],
) -> list[CoffeeshopResponse]:
    return [_to_response(s) for s in await svc.list_coffeeshops()]
