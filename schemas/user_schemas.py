from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class CreateUserRequest(BaseModel):
    email: EmailStr
    password: str

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator('password')
    @classmethod
    def validate_password(cls, value):
        """
        Password must be at least 8 characters.
        """
        if len(value) < 8:
            raise ValueError('Password must be at least 8 characters')
        return value


class LoginRequest(BaseModel):
    email: EmailStr
    password: str

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class UserResponse(BaseModel):
    """Public view of a user. Password hash, token salt and sessions are never exposed."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int = Field(serialization_alias="_id")
    email: str


class AccessTokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(serialization_alias="accessToken")
