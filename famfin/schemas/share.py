from typing import Literal, Optional
from uuid import UUID
from pydantic import BaseModel


class ShareResolveRequest(BaseModel):
    share_id: Optional[str] = None


class ShareResolveResponse(BaseModel):
    user_id: UUID


class SearchResult(BaseModel):
    id: int
    type: Literal["Expense", "Income", "Bill", "Family"]
    title: str
    description: str
    url: str
