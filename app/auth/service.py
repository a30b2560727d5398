"""Authentication service layer"""
import logging
from uuid import UUID
from typing import Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.models import User
from app.auth.repository import UserRepository
from app.auth.jwt_verifier import JWTVerifier
from app.auth.passwords import hash_password, verify_password
from app.auth.permissions_manager import role_for
from app.auth.schemas import AuthResponse, UserResponse
from app.auth.exceptions import (
    EmailAlreadyInUseException,
    InvalidCredentialsException,
    UnknownDepartmentException,
    UserNotFoundException,
)

logger = logging.getLogger(__name__)


def to_user_response(user: User) -> UserResponse:
    """Convert User model to response schema"""
    return UserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        department=user.department,
        is_admin=bool(user.is_admin),
        role=role_for(bool(user.is_admin)),
    )


class AuthService:
    """Signup, login and token verification"""

    def __init__(self, db: AsyncSession, verifier: JWTVerifier, departments: Sequence[str]):
        self.repository = UserRepository(db)
        self.verifier = verifier
        self.departments = departments

    def _issue(self, user: User) -> AuthResponse:
        user_response = to_user_response(user)
        token = self.verifier.issue(
            str(user.id),
            {
                "email": user.email,
                "name": user.name,
                "department": user.department,
                "isAdmin": user_response.is_admin,
                "role": user_response.role,
            },
        )
        return AuthResponse(token=token, user=user_response)

    async def signup(self, email: str, password: str, name: str, department: str) -> AuthResponse:
        """
        Register a new (non-admin) employee and log them in.

        Raises:
            UnknownDepartmentException: department is not configured
            EmailAlreadyInUseException: email already registered
        """
        if department not in self.departments:
            raise UnknownDepartmentException(department)

        email = email.lower()
        if await self.repository.get_by_email(email):
            raise EmailAlreadyInUseException(email)

        user = User(
            email=email,
            password=hash_password(password),
            name=name,
            department=department,
            is_admin=False,
        )
        user = await self.repository.create(user)
        logger.info(f"New account {user.id} in department {department}")
        return self._issue(user)

    async def login(self, email: str, password: str) -> AuthResponse:
        """Check credentials and issue a fresh token."""
        user = await self.repository.get_by_email(email)
        if not user or not verify_password(password, user.password):
            logger.info(f"Failed login for {email}")
            raise InvalidCredentialsException()
        return self._issue(user)

    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Load the account behind a verified token."""
        user = await self.repository.get_by_id(user_id)
        if not user:
            raise UserNotFoundException()
        return to_user_response(user)
