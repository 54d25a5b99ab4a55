from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from famfin.api.dashboard import build_summary_response
from famfin.database import get_session
from famfin.models.family_member import FamilyMember
from famfin.schemas.share import ShareResolveRequest, ShareResolveResponse
from famfin.schemas.summary import FinancialSummaryResponse

router = APIRouter(prefix="/share", tags=["share"])


def _resolve_owner(session: Session, share_id: str):
    member = session.exec(
        select(FamilyMember).where(FamilyMember.share_id == share_id)
    ).first()
    if not member:
        raise HTTPException(status_code=404, detail="Share ID not found.")
    return member.user_id


@router.post("/resolve", response_model=ShareResolveResponse)
def resolve_share_id(
    payload: ShareResolveRequest,
    session: Session = Depends(get_session),
):
    """Maps a member's share token to the owning account. No authentication required."""
    if not payload.share_id:
        raise HTTPException(status_code=400, detail="Missing share_id")
    return ShareResolveResponse(user_id=_resolve_owner(session, payload.share_id))


@router.get("/{share_id}/summary", response_model=FinancialSummaryResponse)
def shared_summary(share_id: str, session: Session = Depends(get_session)):
    # read-only view of the whole account behind the token
    return build_summary_response(session, _resolve_owner(session, share_id))
