from datetime import datetime, timedelta, timezone

from famfin.models.enums import ChangeType, TransactionKind
from famfin.services.activity import ActivityFeed, ChangeEvent, render_message

T0 = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, start=T0):
        self.now = start

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


def make_feed(clock=None):
    return ActivityFeed("Asha", members={7: "Ravi"}, clock=clock or FakeClock())


def expense_event(title="Groceries", amount="500", member_id=None, event_type=ChangeType.insert):
    row = {"title": title, "amount": amount, "member_id": member_id}
    if event_type == ChangeType.delete:
        return ChangeEvent(event_type, TransactionKind.expense, before=row)
    return ChangeEvent(event_type, TransactionKind.expense, after=row)


def test_render_message():
    message = render_message(ChangeType.insert, TransactionKind.expense, "Asha", "Groceries", "500")
    assert message == "Asha logged a expense: Groceries (₹500.00)"


def test_verbs_per_change_type():
    feed = make_feed()
    feed.apply(expense_event(event_type=ChangeType.insert))
    feed.apply(expense_event(event_type=ChangeType.update))
    feed.apply(expense_event(event_type=ChangeType.delete))
    verbs = [item.message.split(" ")[1] for item in feed.items]
    assert verbs == ["deleted", "updated", "logged"]


def test_actor_is_member_name_or_owner():
    feed = make_feed()
    feed.apply(expense_event(member_id=7))
    feed.apply(expense_event(member_id=None))
    feed.apply(expense_event(member_id=99))
    assert [item.message.split(" ")[0] for item in feed.items] == ["Asha", "Asha", "Ravi"]


def test_income_uses_source_as_title():
    feed = make_feed()
    event = ChangeEvent(ChangeType.insert, TransactionKind.income, after={"source": "Salary", "amount": 52000.5})
    item = feed.apply(event)
    assert item.message == "Asha logged a income: Salary (₹52,000.50)"
    assert item.kind == TransactionKind.income


def test_delete_event_renders_from_old_row():
    feed = make_feed()
    item = feed.apply(expense_event(title="Taxi", amount="120", event_type=ChangeType.delete))
    assert item.message == "Asha deleted a expense: Taxi (₹120.00)"


def test_incomplete_events_are_dropped():
    feed = make_feed()
    assert feed.apply(expense_event(title="")) is None
    assert feed.apply(expense_event(amount=None)) is None
    assert feed.apply(expense_event(amount="0")) is None
    assert feed.apply(expense_event(amount="not-a-number")) is None
    assert feed.apply(ChangeEvent(ChangeType.insert, TransactionKind.expense)) is None
    assert len(feed) == 0


def test_feed_is_capped_and_newest_first():
    feed = make_feed()
    for i in range(25):
        feed.apply(expense_event(title=f"Item {i}", amount=i + 1))

    assert len(feed) == 10
    timestamps = [item.timestamp for item in feed.items]
    assert timestamps == sorted(timestamps, reverse=True)
    assert feed.items[0].message.startswith("Asha logged a expense: Item 24")


def test_redelivered_event_is_ignored():
    feed = make_feed()
    event = expense_event()
    assert feed.apply(event) is not None
    assert feed.apply(event) is None
    assert len(feed) == 1


def test_distinct_events_with_same_text_both_show():
    feed = make_feed()
    feed.apply(expense_event())
    feed.apply(expense_event())
    assert len(feed) == 2
    assert feed.items[0].message == feed.items[1].message


def test_seed_merges_history_newest_first():
    feed = make_feed(clock=FakeClock(T0 + timedelta(days=1)))
    expenses = [
        {"id": 1, "title": "Rent", "amount": "15000", "member_id": None, "created_at": T0 - timedelta(hours=3)},
        {"id": 2, "title": "Snacks", "amount": "80", "member_id": 7, "created_at": "2024-01-10T11:00:00"},
    ]
    income = [
        {"id": 1, "source": "Salary", "amount": 50000, "member_id": None, "created_at": T0 - timedelta(hours=2)},
        {"id": 2, "source": "Gift", "amount": 0, "member_id": None, "created_at": T0},
    ]
    feed.seed(expenses, income)

    assert [item.id for item in feed.items] == ["expense-2", "income-1", "expense-1"]
    assert feed.items[0].message == "Ravi logged a expense: Snacks (₹80.00)"

    live = feed.apply(expense_event(title="Milk", amount="60"))
    assert feed.items[0] == live


def test_seed_twice_does_not_duplicate():
    feed = make_feed()
    expenses = [{"id": 1, "title": "Rent", "amount": 100, "created_at": T0}]
    feed.seed(expenses, [])
    feed.seed(expenses, [])
    assert len(feed) == 1


def test_snapshot_is_json_ready():
    feed = make_feed()
    feed.apply(expense_event())
    [entry] = feed.snapshot()
    assert entry["kind"] == "expense"
    assert entry["message"] == "Asha logged a expense: Groceries (₹500.00)"
    assert entry["timestamp"].endswith("+00:00")


def test_insert_event_for_seeded_row_is_not_shown_twice():
    feed = make_feed()
    row = {"id": 5, "title": "Milk", "amount": "60", "member_id": None, "created_at": T0}
    feed.seed([row], [])

    assert feed.apply(ChangeEvent(ChangeType.insert, TransactionKind.expense, after=row)) is None
    assert [item.message for item in feed.items] == ["Asha logged a expense: Milk (₹60.00)"]


def test_same_id_in_other_kind_is_a_different_row():
    feed = make_feed()
    feed.seed([{"id": 5, "title": "Milk", "amount": "60", "created_at": T0}], [])

    event = ChangeEvent(ChangeType.insert, TransactionKind.income, after={"id": 5, "source": "Gift", "amount": "100"})
    assert feed.apply(event) is not None
    assert len(feed) == 2


def test_updates_to_seeded_row_still_show():
    feed = make_feed()
    row = {"id": 5, "title": "Milk", "amount": "60", "created_at": T0}
    feed.seed([row], [])

    updated = feed.apply(ChangeEvent(ChangeType.update, TransactionKind.expense, before=row, after={**row, "amount": "70"}))
    assert updated.message == "Asha updated a expense: Milk (₹70.00)"
    assert len(feed) == 2


def test_history_loaded_after_live_insert_is_not_duplicated():
    feed = make_feed()
    row = {"id": 9, "title": "Tea", "amount": "20", "created_at": T0}
    feed.apply(ChangeEvent(ChangeType.insert, TransactionKind.expense, after=row))
    feed.seed([row], [])
    assert len(feed) == 1
