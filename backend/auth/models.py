from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class TokenRequest(BaseModel):
    """Request model for POST /auth/token"""
    model_config = ConfigDict(extra="forbid")

    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=1)


class RegisterRequest(BaseModel):
    """Request model for POST /auth/register (camelCase on the wire)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=5, max_length=64)
    first_name: str = Field(min_length=1, max_length=30)
    last_name: str = Field(min_length=1, max_length=30)
    email: EmailStr


class TokenResponse(BaseModel):
    """Response model for JWT token"""
    token: str


class UserInfo(BaseModel):
    """User information carried in the JWT"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    username: str
    is_admin: bool
