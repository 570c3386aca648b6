"""User and authentication models."""

from typing import Optional

from pydantic import field_validator

from .base import ApiModel, coerce_id


class User(ApiModel):
    """Represents the signed-in user's profile."""
    id: Optional[str] = None
    email: str = ""
    full_name: Optional[str] = None
    plan: str = "free"
    credits: int = 0
    role: str = "user"
    
    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return coerce_id(value)
    
    @field_validator("plan", "role", mode="before")
    @classmethod
    def _lowercase(cls, value):
        return value.lower() if isinstance(value, str) else value
    
    @field_validator("email", mode="before")
    @classmethod
    def _email_default(cls, value):
        return value or ""
    
    @field_validator("credits", mode="before")
    @classmethod
    def _credits_default(cls, value):
        return 0 if value is None else value
    
    @property
    def is_pro(self) -> bool:
        return self.plan == "pro"
    
    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
    
    @property
    def display_name(self) -> str:
        return self.full_name or self.email.split("@")[0]


class AuthSession(ApiModel):
    """Token plus profile returned by a successful login."""
    token: str
    user: User
