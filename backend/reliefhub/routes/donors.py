"""
ReliefHub Backend — Donor Route Handlers
==========================================

Routes:
    POST /api/v1/donor    record a donor
    GET  /api/v1/donors   list every donor
"""

from fastapi import APIRouter, Depends

from reliefhub.dependencies import get_donor_service
from reliefhub.schemas.common import ApiResponse
from reliefhub.schemas.resources import DonorIn
from reliefhub.services.resource_service import ResourceService

router = APIRouter(prefix="/api/v1", tags=["Donors"])


@router.post("/donor", response_model=ApiResponse, status_code=201, summary="Create a donor")
async def create_donor(
    body: DonorIn,
    service: ResourceService = Depends(get_donor_service),
) -> ApiResponse:
    data = await service.create(body.to_document())
    return ApiResponse(message="Donor created successfully!", data=data)


@router.get("/donors", response_model=ApiResponse, status_code=201, summary="List donors")
async def list_donors(service: ResourceService = Depends(get_donor_service)) -> ApiResponse:
    data = await service.list_all()
    return ApiResponse(message="Donor retrieve successfully!", data=data)
