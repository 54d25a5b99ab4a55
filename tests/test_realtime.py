import asyncio
import threading
from uuid import uuid4

import pytest

from famfin.core.realtime import ChangeHub, publish_change
from famfin.core import realtime
from famfin.models.enums import ChangeType, TransactionKind
from famfin.services.activity import ChangeEvent


def make_event():
    return ChangeEvent(ChangeType.insert, TransactionKind.expense, after={"title": "Tea", "amount": "20"})


@pytest.mark.asyncio
async def test_publish_reaches_only_the_owner():
    hub = ChangeHub()
    owner, stranger = uuid4(), uuid4()
    mine = hub.subscribe(owner)
    theirs = hub.subscribe(stranger)

    event = make_event()
    assert hub.publish(owner, event) == 1

    received = await asyncio.wait_for(mine.get(), timeout=1)
    assert received is event
    assert theirs.queue.empty()


@pytest.mark.asyncio
async def test_unsubscribe_stops_delivery():
    hub = ChangeHub()
    owner = uuid4()
    subscription = hub.subscribe(owner)
    hub.unsubscribe(subscription)

    assert hub.subscriber_count(owner) == 0
    assert hub.publish(owner, make_event()) == 0
    hub.unsubscribe(subscription)


@pytest.mark.asyncio
async def test_publish_from_worker_thread():
    hub = ChangeHub()
    owner = uuid4()
    subscription = hub.subscribe(owner)
    event = make_event()

    worker = threading.Thread(target=hub.publish, args=(owner, event))
    worker.start()
    worker.join()

    assert await asyncio.wait_for(subscription.get(), timeout=1) is event


@pytest.mark.asyncio
async def test_publish_change_serializes_rows(monkeypatch):
    hub = ChangeHub()
    monkeypatch.setattr(realtime, "hub", hub)
    owner = uuid4()
    subscription = hub.subscribe(owner)

    before = {"title": "Tea", "amount": "20"}
    sent = publish_change(owner, ChangeType.delete, TransactionKind.expense, before=before)

    received = await asyncio.wait_for(subscription.get(), timeout=1)
    assert received.event_id == sent.event_id
    assert received.before == before
    assert received.after is None
    assert received.value("title") == "Tea"


def test_closed_listener_is_dropped():
    hub = ChangeHub()
    owner = uuid4()
    loop = asyncio.new_event_loop()

    async def subscribe():
        return hub.subscribe(owner)

    subscription = loop.run_until_complete(subscribe())
    loop.close()

    assert hub.publish(owner, make_event()) == 0
    assert hub.subscriber_count(owner) == 0
    assert subscription.queue.empty()
