"""Authentication Pydantic schemas"""
from uuid import UUID
from pydantic import EmailStr, Field
from app.utils.schemas import CamelModel


class SignupRequest(CamelModel):
    """Request to register a new employee account"""
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)


class LoginRequest(CamelModel):
    """Request to log in with email and password"""
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    """Public view of a user account"""
    id: UUID
    email: str
    name: str
    department: str
    is_admin: bool
    role: str


class AuthResponse(CamelModel):
    """Token plus the user it was issued for"""
    token: str
    user: UserResponse
