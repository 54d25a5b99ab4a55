from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlmodel import Session

from famfin.core.security import get_current_user
from famfin.database import get_session
from famfin.schemas.leaderboard import LeaderboardResponse
from famfin.services.leaderboard import build_roster, monthly_leaderboard
from famfin.utils.dates import month_bounds
from famfin.utils.records import fetch_expenses, fetch_income, fetch_members, fetch_owner_name

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get("", response_model=LeaderboardResponse)
@router.get("/", response_model=LeaderboardResponse)
def family_leaderboard(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    start, end = month_bounds(date.today())

    roster = build_roster(user_id, fetch_owner_name(session, user_id), fetch_members(session, user_id))
    expenses = fetch_expenses(session, user_id, start_date=start, end_date=end)
    income = fetch_income(session, user_id, start_date=start, end_date=end)

    return LeaderboardResponse.model_validate(monthly_leaderboard(roster, expenses, income))
