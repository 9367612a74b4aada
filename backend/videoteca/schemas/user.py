from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

from videoteca.schemas.movie import CamelModel

class UserCreate(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: Optional[str] = None

class UserLogin(BaseModel):
    email: EmailStr
    password: str

class UserResponse(CamelModel):
    id: str
    email: EmailStr
    name: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

class AuthResponse(CamelModel):
    message: str
    token: str
    token_type: str = "bearer"
    user: UserResponse
