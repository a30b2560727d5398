"""JWT Payload Models"""
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class JWTPayload(BaseModel):
    """JWT token payload extracted from a verified access token"""
    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(..., alias="sub")
    email: str
    name: str = ""
    department: str
    is_admin: bool = Field(False, alias="isAdmin")
    roles: list[str] = []
    permissions: list[str] = []
    iat: Optional[datetime] = None
    exp: Optional[datetime] = None
