from sqlmodel import SQLModel, Field
from uuid import UUID
from typing import Optional
from datetime import datetime

from famfin.utils.dates import utcnow


class Notification(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    message: str
    type: str = Field(default="info", max_length=50)
    is_read: bool = Field(default=False)
    link_to: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow, index=True)
