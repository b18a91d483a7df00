"""
ReliefHub Backend — Authentication Route Handlers
===================================================

What:  POST /api/v1/register and POST /api/v1/login.
How:   Parse the body, delegate to AuthService, wrap the result.
Who:   Called by the frontend sign-up and sign-in forms.

Errors are raised by the service and rendered by the global handlers:
    ConflictError      → 400 {"success": false, "message": "User already exists"}
    UnauthorizedError  → 401 {"success": false, "message": "Invalid email or password"}
"""

from fastapi import APIRouter, Depends

from reliefhub.dependencies import get_auth_service
from reliefhub.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from reliefhub.schemas.common import ErrorResponse, MessageResponse
from reliefhub.services.credential_service import AuthService

router = APIRouter(prefix="/api/v1", tags=["Auth"])


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=201,
    responses={400: {"description": "Email already registered", "model": ErrorResponse}},
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    await service.register(name=body.name, email=body.email, password=body.password)
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"description": "Invalid credentials", "model": ErrorResponse}},
    summary="Exchange credentials for a bearer token",
)
async def login(
    body: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    token = await service.authenticate(email=body.email, password=body.password)
    return LoginResponse(token=token)
