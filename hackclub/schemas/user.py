from pydantic import BaseModel, EmailStr, Field, validator
from datetime import datetime
from typing import Optional
from hackclub.models.user import RoleType

class RegisterRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str

    @validator('name')
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class GoogleAuthRequest(BaseModel):
    id_token: str = Field(alias="idToken", min_length=1)

    class Config:
        populate_by_name = True

class RoleUpdateRequest(BaseModel):
    role: RoleType

class UserDisplay(BaseModel):
    id: int
    name: str
    email: str
    role: RoleType
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True

class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserDisplay
