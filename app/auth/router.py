"""Authentication REST API endpoints"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import settings
from app.db.postgres import get_db
from app.auth.middleware import JWTPayload, verify_token, jwt_verifier
from app.auth.service import AuthService
from app.auth.schemas import AuthResponse, LoginRequest, SignupRequest, UserResponse


router = APIRouter(
    prefix="/api/auth",
    tags=["auth"],
)


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    """Dependency to get AuthService"""
    return AuthService(db, jwt_verifier, settings.departments)


@router.post("/signup", response_model=AuthResponse)
async def signup(
    request: SignupRequest,
    service: AuthService = Depends(get_auth_service),
):
    """Create an employee account and return a token for it."""
    return await service.signup(
        email=request.email,
        password=request.password,
        name=request.name,
        department=request.department,
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service),
):
    """Exchange email and password for a token."""
    return await service.login(request.email, request.password)


@router.get("/verify", response_model=UserResponse)
async def verify(
    service: AuthService = Depends(get_auth_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """Return the user behind the bearer token."""
    return await service.get_current_user(jwt_payload.user_id)
