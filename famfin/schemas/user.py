from typing import Optional
from uuid import UUID
from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    email: EmailStr
    password: str
    display_name: Optional[str] = None


class UserRead(BaseModel):
    id: UUID
    email: EmailStr
    display_name: Optional[str] = None


class UserUpdate(BaseModel):
    display_name: Optional[str] = Field(default=None, max_length=100)
