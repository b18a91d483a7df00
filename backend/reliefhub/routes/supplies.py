"""
ReliefHub Backend — Supply Route Handlers
===========================================

What:  Full CRUD for relief supplies.
How:   Each handler makes one SupplyService call and wraps the result in the
       {success, message, data} envelope.

Route Inventory:
    GET    /api/v1/supplies        list every supply
    POST   /api/v1/supply          create a supply
    GET    /api/v1/supply/{id}     one supply, or data=null when absent
    PUT    /api/v1/supply/{id}     overwrite whitelisted fields
    DELETE /api/v1/supply/{id}     remove a supply

Every route answers 201, reads included; existing clients expect it.
"""

from fastapi import APIRouter, Depends

from reliefhub.dependencies import get_supply_service
from reliefhub.schemas.common import ApiResponse
from reliefhub.schemas.resources import SupplyIn, SupplyUpdate
from reliefhub.services.resource_service import SupplyService

router = APIRouter(prefix="/api/v1", tags=["Supplies"])


@router.get("/supplies", response_model=ApiResponse, status_code=201, summary="List supplies")
async def list_supplies(service: SupplyService = Depends(get_supply_service)) -> ApiResponse:
    data = await service.list_all()
    return ApiResponse(message="Supplies retrieve successfully!", data=data)


@router.post("/supply", response_model=ApiResponse, status_code=201, summary="Create a supply")
async def create_supply(
    body: SupplyIn,
    service: SupplyService = Depends(get_supply_service),
) -> ApiResponse:
    data = await service.create(body.to_document())
    return ApiResponse(message="Supplies created successfully!", data=data)


@router.get(
    "/supply/{supply_id}",
    response_model=ApiResponse,
    status_code=201,
    summary="Get a supply by ID",
)
async def get_supply(
    supply_id: str,
    service: SupplyService = Depends(get_supply_service),
) -> ApiResponse:
    data = await service.get(supply_id)
    return ApiResponse(message="Supply is retrieve successfully!", data=data)


@router.put(
    "/supply/{supply_id}",
    response_model=ApiResponse,
    status_code=201,
    summary="Update a supply",
)
async def update_supply(
    supply_id: str,
    body: SupplyUpdate,
    service: SupplyService = Depends(get_supply_service),
) -> ApiResponse:
    data = await service.update(supply_id, body.changes())
    return ApiResponse(message="Supply is updated successfully!", data=data)


@router.delete(
    "/supply/{supply_id}",
    response_model=ApiResponse,
    status_code=201,
    summary="Delete a supply",
)
async def delete_supply(
    supply_id: str,
    service: SupplyService = Depends(get_supply_service),
) -> ApiResponse:
    data = await service.delete(supply_id)
    return ApiResponse(message="Supply is deleted successfully!", data=data)
