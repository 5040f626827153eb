from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoginRequest(BaseModel):
    """Profile claims handed over by the sign-in provider."""

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    email: str = Field(min_length=3, max_length=255)
    first_name: Optional[str] = Field(default=None, alias='firstName', max_length=255)
    last_name: Optional[str] = Field(default=None, alias='lastName', max_length=255)
    profile_image_url: Optional[str] = Field(default=None, alias='profileImageUrl', max_length=1024)

    @field_validator('email')
    @classmethod
    def _check_email(cls, value: str) -> str:
        value = value.strip().lower()
        if '@' not in value:
            raise ValueError('email must contain "@"')
        return value


class ProfileUpdateRequest(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias='firstName', max_length=255)
    last_name: Optional[str] = Field(default=None, alias='lastName', max_length=255)
