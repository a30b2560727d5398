"""Authentication custom exceptions"""
from fastapi import HTTPException, status


class InvalidCredentialsException(HTTPException):
    """Raised when email or password do not match"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )


class EmailAlreadyInUseException(HTTPException):
    """Raised when signing up with an email that is already registered"""
    def __init__(self, email: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Email {email} is already in use"
        )


class UserNotFoundException(HTTPException):
    """Raised when the token subject no longer exists"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found"
        )


class UnknownDepartmentException(HTTPException):
    """Raised when a department is not part of the configured reference list"""
    def __init__(self, department: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown department '{department}'"
        )
