"""
ReliefHub Backend — Volunteer Route Handlers
==============================================

Both routes share the /api/v1/volunteer path: POST creates, GET lists.
"""

from fastapi import APIRouter, Depends

from reliefhub.dependencies import get_volunteer_service
from reliefhub.schemas.common import ApiResponse
from reliefhub.schemas.resources import VolunteerIn
from reliefhub.services.resource_service import ResourceService

router = APIRouter(prefix="/api/v1", tags=["Volunteers"])


@router.post(
    "/volunteer",
    response_model=ApiResponse,
    status_code=201,
    summary="Register a volunteer",
)
async def create_volunteer(
    body: VolunteerIn,
    service: ResourceService = Depends(get_volunteer_service),
) -> ApiResponse:
    data = await service.create(body.to_document())
    return ApiResponse(message="Volunteer post created successfully!", data=data)


@router.get("/volunteer", response_model=ApiResponse, status_code=201, summary="List volunteers")
async def list_volunteers(
    service: ResourceService = Depends(get_volunteer_service),
) -> ApiResponse:
    data = await service.list_all()
    return ApiResponse(message="Volunteer retrieve successfully!", data=data)
