from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SignUpRequest(BaseModel):
    email: EmailStr
    # Length is checked by AuthService so the client gets a readable message
    password: str = Field(max_length=128)


class SignInRequest(BaseModel):
    email: str = Field(max_length=255)
    password: str = Field(max_length=128)


class AuthResponse(BaseModel):
    """Credentials returned by sign-up and sign-in."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(alias="userId")
    email: str
    access_token: str = Field(alias="accessToken")


class PasswordChangeRequest(BaseModel):
    password: str = Field(max_length=128)
