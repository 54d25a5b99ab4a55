from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime


class NotificationRead(BaseModel):
    id: int
    message: str
    type: str
    is_read: bool
    link_to: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotificationList(BaseModel):
    notifications: List[NotificationRead]
    unread_count: int
