import asyncio
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from famfin.constants.limits import ACTIVITY_FEED_LIMIT
from famfin.core.realtime import Subscription, hub
from famfin.core.security import decode_access_token, get_current_user
from famfin.database import get_session
from famfin.schemas.activity import ActivityItemRead
from famfin.services.activity import ActivityFeed
from famfin.utils.records import (
    fetch_members,
    fetch_owner_name,
    fetch_recent_expenses,
    fetch_recent_income,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/activity", tags=["activity"])


def load_feed(session: Session, user_id: UUID) -> ActivityFeed:
    """Feed seeded with the latest history. A failed load leaves it empty instead of failing the view."""
    try:
        owner_name = fetch_owner_name(session, user_id)
        members = {m.id: m.name for m in fetch_members(session, user_id)}
    except SQLAlchemyError:
        logger.warning("Could not load family roster for %s", user_id, exc_info=True)
        return ActivityFeed(owner_name="You")

    feed = ActivityFeed(owner_name=owner_name, members=members)
    try:
        feed.seed(
            fetch_recent_expenses(session, user_id, ACTIVITY_FEED_LIMIT),
            fetch_recent_income(session, user_id, ACTIVITY_FEED_LIMIT),
        )
    except SQLAlchemyError:
        logger.warning("Could not load activity history for %s", user_id, exc_info=True)
    return feed


@router.get("/recent", response_model=List[ActivityItemRead])
def recent_activity(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    return [ActivityItemRead.model_validate(item) for item in load_feed(session, user_id).items]


def _seed_and_release(session: Session, user_id: UUID) -> ActivityFeed:
    # the stream holds no pooled connection while it waits for changes
    try:
        return load_feed(session, user_id)
    finally:
        session.close()


async def _forward_changes(websocket: WebSocket, subscription: Subscription, feed: ActivityFeed):
    while True:
        event = await subscription.get()
        if feed.apply(event) is not None:
            await websocket.send_json(feed.snapshot())


async def _wait_for_disconnect(websocket: WebSocket):
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return


@router.websocket("/ws")
async def activity_stream(
    websocket: WebSocket,
    token: str = Query(...),
    session: Session = Depends(get_session),
):
    """Pushes the whole feed (newest first) after seeding and after every change."""
    user_id = decode_access_token(token)
    if user_id is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    # subscribe before seeding so nothing logged in between is missed
    subscription = hub.subscribe(user_id)
    try:
        feed = await run_in_threadpool(_seed_and_release, session, user_id)
        await websocket.send_json(feed.snapshot())

        tasks = [
            asyncio.create_task(_forward_changes(websocket, subscription, feed)),
            asyncio.create_task(_wait_for_disconnect(websocket)),
        ]
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()
        for task in done:
            task.result()
    except WebSocketDisconnect:
        pass
    finally:
        hub.unsubscribe(subscription)
