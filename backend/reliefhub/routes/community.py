"""
ReliefHub Backend — Community Post Route Handlers
===================================================

Both routes share the /api/v1/community path: POST creates, GET lists.
"""

from fastapi import APIRouter, Depends

from reliefhub.dependencies import get_community_service
from reliefhub.schemas.common import ApiResponse
from reliefhub.schemas.resources import CommunityPostIn
from reliefhub.services.resource_service import ResourceService

router = APIRouter(prefix="/api/v1", tags=["Community"])


@router.post(
    "/community",
    response_model=ApiResponse,
    status_code=201,
    summary="Create a community post",
)
async def create_community_post(
    body: CommunityPostIn,
    service: ResourceService = Depends(get_community_service),
) -> ApiResponse:
    data = await service.create(body.to_document())
    return ApiResponse(message="Community post created successfully!", data=data)


@router.get(
    "/community",
    response_model=ApiResponse,
    status_code=201,
    summary="List community posts",
)
async def list_community_posts(
    service: ResourceService = Depends(get_community_service),
) -> ApiResponse:
    data = await service.list_all()
    return ApiResponse(message="Community post retrieve successfully!", data=data)
