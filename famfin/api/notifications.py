from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import update
from sqlmodel import Session, func, select

from famfin.constants.limits import NOTIFICATIONS_LIMIT
from famfin.core.security import get_current_user
from famfin.database import get_session
from famfin.models.notification import Notification
from famfin.schemas.notification import NotificationList, NotificationRead
from famfin.utils.ownership import get_owned_or_404

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationList)
@router.get("/", response_model=NotificationList)
def list_notifications(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    """Newest notifications first; the unread count covers the whole inbox, not just this page."""
    notifications = session.exec(
        select(Notification)
        .where(Notification.user_id == user_id)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
        .limit(NOTIFICATIONS_LIMIT)
    ).all()
    unread_count = session.exec(
        select(func.count(Notification.id)).where(
            Notification.user_id == user_id,
            Notification.is_read == False,  # noqa: E712
        )
    ).one()
    return NotificationList(
        notifications=[NotificationRead.model_validate(n) for n in notifications],
        unread_count=unread_count,
    )


@router.post("/read-all")
def mark_all_read(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    session.exec(
        update(Notification)
        .where(Notification.user_id == user_id, Notification.is_read == False)  # noqa: E712
        .values(is_read=True)
    )
    session.commit()
    return {"message": "All notifications marked as read"}


@router.post("/{notification_id}/read", response_model=NotificationRead)
def mark_read(
    notification_id: int,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    notification = get_owned_or_404(session, Notification, notification_id, user_id, "Notification not found")
    notification.is_read = True

    session.add(notification)
    session.commit()
    session.refresh(notification)
    return notification
