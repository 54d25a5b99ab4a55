from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class MemberStatRead(BaseModel):
    id: str
    name: str
    member_id: Optional[int] = None
    net_savings: float
    expense_count: int
    income_count: int

    model_config = ConfigDict(from_attributes=True)


class LeaderboardResponse(BaseModel):
    stats: List[MemberStatRead]
    top_savers: List[MemberStatRead]
    top_trackers: List[MemberStatRead]

    model_config = ConfigDict(from_attributes=True)
