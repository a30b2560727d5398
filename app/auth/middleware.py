"""Authentication Middleware"""
import logging
from jose import JWTError
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer
from pydantic import ValidationError

from app.config import settings
from app.auth.models import JWTPayload
from app.auth.jwt_verifier import JWTVerifier
from app.auth.permissions_manager import PermissionsManager, role_for

logger = logging.getLogger(__name__)

# Initialize components
security = HTTPBearer()
jwt_verifier = JWTVerifier(
    secret=settings.jwt_secret,
    algorithm=settings.jwt_algorithm,
    expires_minutes=settings.jwt_expires_minutes,
)
permissions_manager = PermissionsManager(settings.permissions_file)


def build_payload(claims: dict) -> JWTPayload:
    """
    Turn decoded token claims into a JWTPayload with resolved permissions.

    Expected JWT claims:
    - sub: user_id
    - email, name, department
    - isAdmin: admin flag, mapped to the `admin` or `user` role
    """
    role = claims.get("role") or role_for(bool(claims.get("isAdmin")))
    roles = [role]
    return JWTPayload(
        sub=claims["sub"],
        email=claims["email"],
        name=claims.get("name", ""),
        department=claims["department"],
        isAdmin=bool(claims.get("isAdmin")),
        roles=roles,
        permissions=permissions_manager.get_permissions_for_roles(roles),
        iat=claims.get("iat"),
        exp=claims.get("exp"),
    )


async def verify_token(credentials = Depends(security)) -> JWTPayload:
    """Verify the bearer token and extract its payload."""
    token = credentials.credentials

    try:
        claims = jwt_verifier.verify_and_decode(token)
        return build_payload(claims)

    except JWTError as e:
        logger.info(f"Rejected token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}"
        )
    except (KeyError, ValidationError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: malformed claims ({e})"
        )


def check_permission(jwt_payload: JWTPayload, required_permission: str):
    """
    Check if user has required permission.

    Args:
        jwt_payload: JWT payload containing user permissions
        required_permission: Permission string to check

    Raises:
        HTTPException: If user lacks required permission
    """
    if required_permission not in jwt_payload.permissions:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Missing required permission: {required_permission}"
        )
