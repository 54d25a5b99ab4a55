from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class FamilyMemberCreate(BaseModel):
    name: str = Field(min_length=1)
    relation: Optional[str] = None


class FamilyMemberRead(FamilyMemberCreate):
    id: int
    share_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
