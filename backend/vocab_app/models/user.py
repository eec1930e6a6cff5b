from pydantic import field_validator
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from typing import Optional
import uuid


class UserBase(SQLModel):
    """Base user model with shared fields."""
    email: str = Field(unique=True, index=True)
    name: Optional[str] = None


class User(UserBase, table=True):
    """User database model."""
    __tablename__ = "users"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    hashed_password: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    is_active: bool = Field(default=True)


class UserCreate(SQLModel):
    """Schema for user registration."""
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=6)
    name: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, value: str) -> str:
        # bcrypt rejects secrets longer than 72 bytes
        if len(value.encode("utf-8")) > 72:
            raise ValueError("password must be at most 72 bytes")
        return value


class UserResponse(SQLModel):
    """Schema for user response (excludes password)."""
    id: str
    email: str
    name: Optional[str]
    created_at: datetime
    is_active: bool


class LoginRequest(SQLModel):
    """Schema for login request."""
    email: str
    password: str


class AuthResponse(SQLModel):
    """Schema for register/login response."""
    token: str
    token_type: str = "bearer"
    expires_in: int  # seconds until the token expires
    user: UserResponse
