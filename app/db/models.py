from uuid import uuid4
from sqlalchemy import Column, String, DateTime, Text, Boolean, ForeignKey, Uuid
from app.db.base import Base
from app.utils.timezone import utcnow


class Department(Base):
    """
    Fixed reference set of departments.
    Seeded from configuration, never edited through the API.
    """
    __tablename__ = "departments"

    name = Column(String(100), primary_key=True)
    description = Column(Text, nullable=True)


class User(Base):
    """Employee account; admins manage periods and templates"""
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    name = Column(String(255), nullable=False)
    department = Column(String(100), ForeignKey("departments.name"), nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
