# famfin/services/activity.py

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Set
from uuid import uuid4

from famfin.constants.limits import ACTIVITY_FEED_LIMIT
from famfin.models.enums import ChangeType, TransactionKind
from famfin.services.records import field_of, label_of, to_amount
from famfin.utils.dates import as_utc, to_datetime, utcnow
from famfin.utils.formatting import format_amount

VERBS: Dict[ChangeType, str] = {
    ChangeType.insert: "logged",
    ChangeType.update: "updated",
    ChangeType.delete: "deleted",
}

# income rows have no title, the source plays that role
TITLE_FIELDS: Dict[TransactionKind, str] = {
    TransactionKind.expense: "title",
    TransactionKind.income: "source",
}


@dataclass(frozen=True)
class ChangeEvent:
    event_type: ChangeType
    kind: TransactionKind
    before: Optional[Dict[str, Any]] = None
    after: Optional[Dict[str, Any]] = None
    event_id: str = field(default_factory=lambda: uuid4().hex)

    def value(self, name: str) -> Any:
        """Reads a column from the new row, falling back to the old one (deletes only carry `before`)."""
        for row in (self.after, self.before):
            if row and row.get(name) not in (None, ""):
                return row[name]
        return None


@dataclass(frozen=True)
class ActivityItem:
    id: str
    timestamp: datetime
    message: str
    kind: TransactionKind


def render_message(
    event_type: ChangeType,
    kind: TransactionKind,
    actor: str,
    title: str,
    amount: Any,
) -> str:
    """Feed text, e.g. `Asha logged a expense: Groceries (₹500.00)`."""
    return (
        f"{actor} {VERBS[event_type]} a {kind.value}: "
        f"{title} ({format_amount(to_amount(amount))})"
    )


def _history_id(kind: TransactionKind, record_id: Any) -> str:
    return f"{kind.value}-{record_id}"


def _record_key(event: ChangeEvent) -> Optional[str]:
    """Identity of the inserted row, shared with the seeded history item for that row."""
    if event.event_type != ChangeType.insert or not event.after or event.after.get("id") is None:
        return None
    return _history_id(event.kind, event.after["id"])


def _renderable(amount: Any, title: Any) -> bool:
    if not title or amount in (None, ""):
        return False
    try:
        return to_amount(amount) != 0
    except ValueError:
        return False


class ActivityFeed:
    """Bounded, newest-first list of family activity for one session.

    Seeded from the latest stored expenses/income and then fed change events
    one at a time. Every operation re-sorts by timestamp and drops the oldest
    entries beyond `limit`.
    """

    def __init__(
        self,
        owner_name: str,
        members: Optional[Mapping[int, str]] = None,
        limit: int = ACTIVITY_FEED_LIMIT,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.owner_name = owner_name
        self.members = dict(members or {})
        self.limit = limit
        self._clock = clock
        self._items: List[ActivityItem] = []
        # rows already shown as logged, so a seeded row and its insert event collapse to one entry
        self._logged: Set[str] = set()

    @property
    def items(self) -> List[ActivityItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def actor_for(self, member_id: Optional[int]) -> str:
        if member_id is not None and member_id in self.members:
            return self.members[member_id]
        return self.owner_name

    def seed(self, expenses: Iterable[Any], income: Iterable[Any]) -> None:
        """Loads stored history; timestamps are the rows' own creation times."""
        history = []
        for kind, records in ((TransactionKind.expense, expenses), (TransactionKind.income, income)):
            for record in records:
                item = self._history_item(kind, record)
                if item is not None and item.id not in self._logged:
                    self._logged.add(item.id)
                    history.append(item)
        self._merge(history)

    def apply(self, event: ChangeEvent) -> Optional[ActivityItem]:
        """Adds the item for a live change event; returns None when it was dropped."""
        if any(item.id == event.event_id for item in self._items):
            return None
        record_key = _record_key(event)
        if record_key is not None and record_key in self._logged:
            return None

        amount = event.value("amount")
        title = event.value(TITLE_FIELDS[event.kind])
        if not _renderable(amount, title):
            return None

        item = ActivityItem(
            id=event.event_id,
            timestamp=self._clock(),
            message=render_message(
                event.event_type,
                event.kind,
                self.actor_for(event.value("member_id")),
                label_of(title),
                amount,
            ),
            kind=event.kind,
        )
        if record_key is not None:
            self._logged.add(record_key)
        self._merge([item])
        return item

    def snapshot(self) -> List[Dict[str, Any]]:
        return [
            {
                "id": item.id,
                "timestamp": as_utc(item.timestamp).isoformat(),
                "message": item.message,
                "kind": item.kind.value,
            }
            for item in self._items
        ]

    def _history_item(self, kind: TransactionKind, record: Any) -> Optional[ActivityItem]:
        amount = field_of(record, "amount")
        title = field_of(record, TITLE_FIELDS[kind])
        if not _renderable(amount, title):
            return None
        created_at = field_of(record, "created_at")
        return ActivityItem(
            id=_history_id(kind, field_of(record, "id")),
            timestamp=to_datetime(created_at) if created_at else self._clock(),
            message=render_message(
                ChangeType.insert,
                kind,
                self.actor_for(field_of(record, "member_id")),
                label_of(title),
                amount,
            ),
            kind=kind,
        )

    def _merge(self, new_items: List[ActivityItem]) -> None:
        # sorted() is stable, so new items stay ahead of older ones with the same timestamp
        known = {item.id for item in self._items}
        fresh = [item for item in new_items if item.id not in known]
        combined = sorted(fresh + self._items, key=lambda i: as_utc(i.timestamp), reverse=True)
        self._items = combined[: self.limit]
